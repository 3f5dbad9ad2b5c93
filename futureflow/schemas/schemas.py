"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict
from datetime import datetime
from enum import Enum


class ApiModel(BaseModel):
    """Base for every schema: camelCase aliases, snake_case accepted too."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    admin = "admin"
    student = "student"


class GoalType(str, Enum):
    short_term = "short-term"
    long_term = "long-term"


class GoalStatus(str, Enum):
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"


class OpportunityType(str, Enum):
    internship = "internship"
    job = "job"


class ResourceType(str, Enum):
    pdf = "pdf"
    video = "video"
    article = "article"
    template = "template"


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(ApiModel):
    # Any "role" in the body is ignored: registration always creates students
    email: EmailStr
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=2, max_length=100)
    year_level: Optional[int] = Field(None, ge=1, le=5)
    course: Optional[str] = None

class LoginRequest(ApiModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

class UserResponse(ApiModel):
    id: str
    email: str
    name: str
    role: UserRole
    year_level: Optional[int] = None
    course: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None


# ============================================================
# PROFILE SCHEMAS
# ============================================================

class ProfileUpdate(ApiModel):
    gpa: Optional[float] = Field(None, ge=0, le=4)
    skills: Optional[List[str]] = None
    interests: Optional[List[str]] = None
    career_preferences: Optional[List[str]] = None
    certifications: Optional[List[str]] = None
    subjects_taken: Optional[List[str]] = None
    resume_url: Optional[str] = None
    bio: Optional[str] = None

class ProfileResponse(ApiModel):
    id: str
    user_id: str
    gpa: Optional[float] = None
    skills: List[str] = []
    interests: List[str] = []
    career_preferences: List[str] = []
    certifications: List[str] = []
    subjects_taken: List[str] = []
    resume_url: Optional[str] = None
    bio: Optional[str] = None

class StudentSummary(ApiModel):
    name: str
    email: str
    year_level: Optional[int] = None
    course: Optional[str] = None
    avatar_url: Optional[str] = None

class StudentProfileResponse(ProfileResponse):
    id: Optional[str] = None
    user_id: str
    user: StudentSummary


# ============================================================
# GOAL SCHEMAS
# ============================================================

class GoalCreate(ApiModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    type: GoalType
    specific: Optional[str] = None
    measurable: Optional[str] = None
    achievable: Optional[str] = None
    relevant: Optional[str] = None
    time_bound: Optional[str] = None
    progress: int = Field(0, ge=0, le=100)
    status: GoalStatus = GoalStatus.in_progress
    target_date: Optional[datetime] = None

class GoalUpdate(ApiModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    type: Optional[GoalType] = None
    specific: Optional[str] = None
    measurable: Optional[str] = None
    achievable: Optional[str] = None
    relevant: Optional[str] = None
    time_bound: Optional[str] = None
    progress: Optional[int] = Field(None, ge=0, le=100)
    status: Optional[GoalStatus] = None
    target_date: Optional[datetime] = None

class GoalResponse(ApiModel):
    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    type: GoalType
    specific: Optional[str] = None
    measurable: Optional[str] = None
    achievable: Optional[str] = None
    relevant: Optional[str] = None
    time_bound: Optional[str] = None
    progress: int
    status: GoalStatus
    target_date: Optional[datetime] = None
    created_at: datetime


# ============================================================
# CAREER SCHEMAS
# ============================================================

class CareerCreate(ApiModel):
    title: str = Field(..., min_length=2, max_length=200)
    description: str = Field(..., min_length=1)
    overview: Optional[str] = None
    required_skills: List[str] = []
    recommended_tools: List[str] = []
    salary_range: Optional[str] = None
    industry: Optional[str] = None
    learning_path: Optional[Dict[str, List[str]]] = None
    icon: Optional[str] = None

class CareerUpdate(ApiModel):
    title: Optional[str] = Field(None, min_length=2, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    overview: Optional[str] = None
    required_skills: Optional[List[str]] = None
    recommended_tools: Optional[List[str]] = None
    salary_range: Optional[str] = None
    industry: Optional[str] = None
    learning_path: Optional[Dict[str, List[str]]] = None
    icon: Optional[str] = None

class CareerResponse(ApiModel):
    id: str
    title: str
    description: str
    overview: Optional[str] = None
    required_skills: List[str] = []
    recommended_tools: List[str] = []
    salary_range: Optional[str] = None
    industry: Optional[str] = None
    learning_path: Optional[Dict[str, List[str]]] = None
    icon: Optional[str] = None


# ============================================================
# OPPORTUNITY SCHEMAS
# ============================================================

class OpportunityCreate(ApiModel):
    title: str = Field(..., min_length=2, max_length=200)
    company: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    location: Optional[str] = None
    type: OpportunityType
    industry: Optional[str] = None
    required_skills: List[str] = []
    application_url: Optional[str] = None
    deadline: Optional[datetime] = None
    is_active: bool = True

class OpportunityUpdate(ApiModel):
    title: Optional[str] = Field(None, min_length=2, max_length=200)
    company: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = None
    type: Optional[OpportunityType] = None
    industry: Optional[str] = None
    required_skills: Optional[List[str]] = None
    application_url: Optional[str] = None
    deadline: Optional[datetime] = None
    is_active: Optional[bool] = None

class OpportunityResponse(ApiModel):
    id: str
    title: str
    company: str
    description: str
    location: Optional[str] = None
    type: OpportunityType
    industry: Optional[str] = None
    required_skills: List[str] = []
    application_url: Optional[str] = None
    deadline: Optional[datetime] = None
    is_active: bool
    created_at: datetime

class SavedCheckResponse(ApiModel):
    saved: bool


# ============================================================
# RESOURCE SCHEMAS
# ============================================================

class ResourceCreate(ApiModel):
    title: str = Field(..., min_length=2, max_length=200)
    description: Optional[str] = None
    type: ResourceType
    category: str = Field(..., min_length=1)
    url: Optional[str] = None
    tags: List[str] = []

class ResourceUpdate(ApiModel):
    title: Optional[str] = Field(None, min_length=2, max_length=200)
    description: Optional[str] = None
    type: Optional[ResourceType] = None
    category: Optional[str] = Field(None, min_length=1)
    url: Optional[str] = None
    tags: Optional[List[str]] = None

class ResourceResponse(ApiModel):
    id: str
    title: str
    description: Optional[str] = None
    type: ResourceType
    category: str
    url: Optional[str] = None
    tags: List[str] = []
    download_count: int
    created_at: datetime


# ============================================================
# TRAINING PROGRAM SCHEMAS
# ============================================================

class TrainingProgramCreate(ApiModel):
    title: str = Field(..., min_length=2, max_length=200)
    description: Optional[str] = None
    provider: Optional[str] = None
    duration: Optional[str] = None
    skills: List[str] = []
    certification_offered: bool = False
    url: Optional[str] = None
    is_active: bool = True

class TrainingProgramUpdate(ApiModel):
    title: Optional[str] = Field(None, min_length=2, max_length=200)
    description: Optional[str] = None
    provider: Optional[str] = None
    duration: Optional[str] = None
    skills: Optional[List[str]] = None
    certification_offered: Optional[bool] = None
    url: Optional[str] = None
    is_active: Optional[bool] = None

class TrainingProgramResponse(ApiModel):
    id: str
    title: str
    description: Optional[str] = None
    provider: Optional[str] = None
    duration: Optional[str] = None
    skills: List[str] = []
    certification_offered: bool
    url: Optional[str] = None
    is_active: bool


# ============================================================
# PROGRESS & ACADEMIC SCHEMAS
# ============================================================

class SkillLevelUpdate(ApiModel):
    level: int = Field(..., ge=0, le=100)

class ProgressRecordResponse(ApiModel):
    id: int
    user_id: str
    skill_name: str
    level: int
    recorded_at: datetime

class SkillProgress(ApiModel):
    skill_name: str
    level: int
    recorded_at: Optional[datetime] = None

class AcademicModuleCreate(ApiModel):
    module_name: str = Field(..., min_length=1, max_length=200)
    grade: Optional[str] = None
    units: Optional[int] = Field(None, ge=0)
    semester: Optional[str] = None
    completed: bool = False

class AcademicModuleUpdate(ApiModel):
    module_name: Optional[str] = Field(None, min_length=1, max_length=200)
    grade: Optional[str] = None
    units: Optional[int] = Field(None, ge=0)
    semester: Optional[str] = None
    completed: Optional[bool] = None

class AcademicModuleResponse(ApiModel):
    id: str
    user_id: str
    module_name: str
    grade: Optional[str] = None
    units: Optional[int] = None
    semester: Optional[str] = None
    completed: bool

class ProgressOverviewResponse(ApiModel):
    skill_progress: List[SkillProgress]
    goals: List[GoalResponse]
    modules: List[AcademicModuleResponse]
    overall_progress: int


# ============================================================
# DASHBOARD & RANKING SCHEMAS
# ============================================================

class StudentDashboardStats(ApiModel):
    goals_count: int
    completed_goals: int
    skills_count: int
    careers_count: int
    overall_progress: int

class AdminDashboardStats(ApiModel):
    total_students: int
    total_careers: int
    total_opportunities: int
    total_resources: int

class AdminStatsResponse(ApiModel):
    total_users: int
    total_goals: int
    total_opportunities: int
    total_resources: int

class RankingEntry(ApiModel):
    user_id: str
    name: str
    score: float
    skills_count: int
    completed_goals: int
    overall_progress: int
    gpa: Optional[float] = None
    rank: int

class RankingResponse(ApiModel):
    leaderboard: List[RankingEntry]
    current_user: Optional[RankingEntry] = None
    total: int

class StudentAnalyticsStats(ApiModel):
    total_goals: int
    completed_goals: int
    in_progress_goals: int
    total_skills: int
    average_skill_level: float

class StudentAnalyticsResponse(ApiModel):
    user: UserResponse
    profile: Optional[ProfileResponse] = None
    goals: List[GoalResponse]
    progress_records: List[ProgressRecordResponse]
    stats: StudentAnalyticsStats


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(ApiModel):
    message: str
    success: bool = True
