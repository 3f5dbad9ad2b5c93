"""
FutureFlow
Student career-planning platform.

Architecture:
- Relational database: users, profiles, goals, catalogs, progress history
- Server-side sessions behind an httpOnly cookie
- Pure scoring for career recommendations and the student leaderboard
"""

__version__ = "1.0.0"
