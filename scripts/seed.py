#!/usr/bin/env python3
"""
Seed Script

Creates the schema and loads demo data:
1. One admin and two student accounts (passwords are hashed)
2. Student profiles and sample SMART goals
3. Starter catalog: careers, opportunities, resources, training programs

Safe to re-run: exits early if the admin account already exists.

Run: python scripts/seed.py
"""
import sys
sys.path.insert(0, '.')

from datetime import datetime

from futureflow.db.schema import init_db
from futureflow.schemas.schemas import UserRole
from futureflow.services.user_service import get_user_service, get_profile_service
from futureflow.services.goal_service import get_goal_service
from futureflow.services.catalog_service import (
    get_career_service, get_opportunity_service, get_resource_service, get_training_program_service
)

ADMIN = {"email": "admin@futureflow.com", "password": "admin123", "name": "Admin User"}

STUDENTS = [
    {
        "account": {
            "email": "student@futureflow.com", "password": "student123", "name": "Test Student",
            "year_level": 3, "course": "Computer Engineering",
        },
        "profile": {
            "gpa": 3.5,
            "skills": ["Python", "C++", "JavaScript", "React"],
            "interests": ["Web Development", "AI/ML", "Embedded Systems"],
            "career_preferences": ["Software Engineer", "Full Stack Developer"],
            "certifications": ["AWS Cloud Practitioner"],
            "subjects_taken": ["Data Structures", "Algorithms", "Web Development", "Database Systems"],
            "bio": "Passionate about software development and emerging technologies",
        },
    },
    {
        "account": {
            "email": "john.doe@futureflow.com", "password": "john123", "name": "John Doe",
            "year_level": 4, "course": "Computer Engineering",
        },
        "profile": {
            "gpa": 3.8,
            "skills": ["Java", "Python", "VLSI Design", "SystemVerilog"],
            "interests": ["Hardware Design", "Embedded Systems", "IoT"],
            "career_preferences": ["VLSI Engineer", "Embedded Systems Engineer"],
            "certifications": ["Certified LabVIEW Associate Developer"],
            "subjects_taken": ["Digital Design", "Microprocessors", "VLSI Design", "Computer Architecture"],
            "bio": "Hardware enthusiast with focus on chip design and embedded systems",
        },
    },
]

CAREERS = [
    {
        "title": "Software Engineer",
        "description": "Design, develop, and maintain software applications and systems",
        "overview": "Software engineers build scalable applications, work with modern frameworks, "
                    "and solve complex problems using code.",
        "required_skills": ["JavaScript", "Python", "Java", "Git", "SQL", "REST APIs", "Problem Solving"],
        "recommended_tools": ["VS Code", "GitHub", "Docker", "Postman", "AWS/Azure"],
        "salary_range": "$70,000 - $150,000",
        "industry": "Technology",
        "learning_path": {
            "beginner": ["Learn programming basics", "Master data structures", "Version control (Git)"],
            "intermediate": ["Build web applications", "Learn databases", "API development"],
            "advanced": ["System design", "Cloud deployment", "Microservices architecture"],
        },
        "icon": "Code",
    },
    {
        "title": "Full Stack Developer",
        "description": "Build complete web applications from frontend to backend",
        "overview": "Full stack developers handle both client-side and server-side development.",
        "required_skills": ["React", "Node.js", "TypeScript", "MongoDB", "PostgreSQL", "HTML/CSS", "Redux"],
        "recommended_tools": ["VS Code", "Next.js", "Express.js", "Vercel"],
        "salary_range": "$65,000 - $140,000",
        "industry": "Technology",
        "learning_path": {
            "beginner": ["HTML/CSS/JS fundamentals", "React basics", "Node.js intro"],
            "intermediate": ["Full CRUD apps", "Authentication", "Database design"],
            "advanced": ["Performance optimization", "Server-side rendering", "DevOps"],
        },
        "icon": "Layers",
    },
    {
        "title": "VLSI Design Engineer",
        "description": "Design and verify integrated circuits and chip architectures",
        "overview": "VLSI engineers work on semiconductor chip design, verification, and physical design.",
        "required_skills": ["Verilog", "VHDL", "SystemVerilog", "Digital Design", "Cadence Tools", "Synopsys"],
        "recommended_tools": ["ModelSim", "Xilinx Vivado", "Cadence Virtuoso"],
        "salary_range": "$80,000 - $160,000",
        "industry": "Semiconductor",
        "learning_path": {
            "beginner": ["Digital logic design", "Verilog/VHDL basics", "FPGA programming"],
            "intermediate": ["RTL design", "Synthesis", "Static timing analysis"],
            "advanced": ["Physical design", "Low power techniques", "DFT"],
        },
        "icon": "Cpu",
    },
    {
        "title": "Embedded Systems Engineer",
        "description": "Develop software for embedded hardware and IoT devices",
        "overview": "Embedded engineers program microcontrollers and real-time systems.",
        "required_skills": ["C", "C++", "ARM", "RTOS", "I2C/SPI", "Debugging", "Linux"],
        "recommended_tools": ["Keil", "Arduino IDE", "STM32CubeIDE", "JTAG Debugger"],
        "salary_range": "$75,000 - $145,000",
        "industry": "Electronics/IoT",
        "learning_path": {
            "beginner": ["C programming", "Microcontroller basics", "GPIO/Timers"],
            "intermediate": ["Communication protocols", "RTOS concepts", "Driver development"],
            "advanced": ["Linux kernel modules", "Power management", "Safety-critical systems"],
        },
        "icon": "Microchip",
    },
    {
        "title": "Data Scientist",
        "description": "Analyze complex data and build predictive models",
        "overview": "Data scientists use statistics, machine learning, and programming to extract insights.",
        "required_skills": ["Python", "R", "SQL", "Machine Learning", "Statistics", "Pandas", "TensorFlow"],
        "recommended_tools": ["Jupyter", "scikit-learn", "PyTorch", "Tableau"],
        "salary_range": "$85,000 - $165,000",
        "industry": "Data/Analytics",
        "learning_path": {
            "beginner": ["Python basics", "Statistics fundamentals", "Data visualization"],
            "intermediate": ["Machine learning algorithms", "Feature engineering", "SQL mastery"],
            "advanced": ["Deep learning", "MLOps", "Big data tools (Spark)"],
        },
        "icon": "BarChart",
    },
]

OPPORTUNITIES = [
    {
        "title": "Software Engineering Intern",
        "company": "Tech Solutions Inc.",
        "description": "Build scalable web applications using React and Node.js with experienced engineers.",
        "location": "Manila, Philippines",
        "type": "internship",
        "industry": "Technology",
        "required_skills": ["JavaScript", "React", "Node.js", "Git"],
        "application_url": "https://techsolutions.ph/careers/swe-intern",
        "deadline": datetime(2027, 3, 15),
        "is_active": True,
    },
    {
        "title": "VLSI Design Intern",
        "company": "SemiConductor Corp",
        "description": "Work on RTL design and verification with industry-standard EDA tools.",
        "location": "Quezon City, Philippines",
        "type": "internship",
        "industry": "Semiconductor",
        "required_skills": ["Verilog", "Digital Design", "FPGA"],
        "application_url": "https://semicorp.ph/internships",
        "deadline": datetime(2027, 2, 28),
        "is_active": True,
    },
    {
        "title": "Junior Full Stack Developer",
        "company": "WebDev Studios",
        "description": "Build modern web applications with React, TypeScript, and PostgreSQL.",
        "location": "Makati, Philippines",
        "type": "job",
        "industry": "Technology",
        "required_skills": ["React", "TypeScript", "PostgreSQL", "REST APIs"],
        "application_url": "https://webdevstudios.ph/careers",
        "deadline": datetime(2027, 4, 30),
        "is_active": True,
    },
    {
        "title": "Data Analyst Internship",
        "company": "Analytics Pro",
        "description": "Analyze business data and create visualizations with Python and SQL.",
        "location": "Ortigas, Pasig",
        "type": "internship",
        "industry": "Data/Analytics",
        "required_skills": ["Python", "SQL", "Excel", "Data Visualization"],
        "application_url": "https://analyticspro.ph/interns",
        "deadline": datetime(2027, 3, 20),
        "is_active": True,
    },
]

RESOURCES = [
    {
        "title": "Introduction to Python Programming",
        "description": "Python basics, data structures, and object-oriented programming",
        "type": "pdf",
        "category": "Programming",
        "url": "/resources/python-guide.pdf",
        "tags": ["Python", "Programming", "Beginner"],
    },
    {
        "title": "React Complete Course",
        "description": "React from basics to hooks, context, and Redux",
        "type": "video",
        "category": "Web Development",
        "url": "/resources/react-course",
        "tags": ["React", "JavaScript", "Frontend"],
    },
    {
        "title": "Professional Resume Template - Engineering",
        "description": "ATS-friendly resume template tailored for engineering students",
        "type": "template",
        "category": "Career",
        "url": "/resources/resume-template.docx",
        "tags": ["Resume", "Career", "Template"],
    },
    {
        "title": "Interview Preparation Guide",
        "description": "Technical interview questions and answers for Computer Engineering roles",
        "type": "article",
        "category": "Career",
        "url": "/resources/interview-guide",
        "tags": ["Interview", "Career", "Technical"],
    },
]

TRAINING_PROGRAMS = [
    {
        "title": "AWS Cloud Practitioner Certification",
        "description": "Cloud computing fundamentals and AWS certification prep",
        "provider": "Amazon Web Services",
        "duration": "4 weeks",
        "skills": ["Cloud Computing", "AWS", "DevOps"],
        "certification_offered": True,
        "url": "https://aws.amazon.com/certification/certified-cloud-practitioner/",
        "is_active": True,
    },
    {
        "title": "Cisco CCNA Training",
        "description": "Network fundamentals, routing, switching, and security",
        "provider": "Cisco Networking Academy",
        "duration": "8 weeks",
        "skills": ["Networking", "Cisco", "Routing", "Switching"],
        "certification_offered": True,
        "url": "https://www.netacad.com/courses/networking/ccna",
        "is_active": True,
    },
    {
        "title": "Python for Data Science",
        "description": "Python, pandas, NumPy, and data visualization",
        "provider": "Coursera - IBM",
        "duration": "5 weeks",
        "skills": ["Python", "Data Science", "Pandas", "NumPy"],
        "certification_offered": True,
        "url": "https://www.coursera.org/learn/python-for-applied-data-science-ai",
        "is_active": True,
    },
]

GOALS = [
    {
        "title": "Master React and Node.js",
        "description": "Build full-stack web applications with modern tools",
        "type": "short-term",
        "specific": "Complete 3 full-stack projects using React and Node.js",
        "measurable": "Track project completion and code commits",
        "achievable": "Dedicate 10 hours per week to learning and building",
        "relevant": "Aligned with Full Stack Developer career path",
        "time_bound": "Complete by end of semester",
        "progress": 35,
        "status": "in_progress",
        "target_date": datetime(2027, 6, 30),
    },
    {
        "title": "Get AWS Cloud Practitioner Certification",
        "description": "Pass the AWS Cloud Practitioner certification exam",
        "type": "short-term",
        "specific": "Study AWS services and take practice exams",
        "measurable": "Complete certification course and pass exam",
        "achievable": "Study 5 hours per week for 4 weeks",
        "relevant": "Valuable for cloud-based software engineering roles",
        "time_bound": "Complete by March",
        "progress": 60,
        "status": "in_progress",
        "target_date": datetime(2027, 3, 31),
    },
    {
        "title": "Become a Software Engineer at Tech Company",
        "description": "Secure a software engineering position at a reputable tech company",
        "type": "long-term",
        "progress": 20,
        "status": "in_progress",
        "target_date": datetime(2028, 4, 30),
    },
]


def seed_users():
    print("\n[1] Creating accounts...")
    users = get_user_service()
    profiles = get_profile_service()

    users.create_user(role=UserRole.admin, **ADMIN)
    print(f"    ✅ Admin: {ADMIN['email']}")

    created = []
    for student in STUDENTS:
        user = users.register_student(**student["account"])
        profiles.update(user["id"], student["profile"])
        created.append(user)
        print(f"    ✅ Student: {user['email']}")
    return created


def seed_catalog():
    print("\n[2] Loading catalog...")
    for label, service, rows in (
        ("careers", get_career_service(), CAREERS),
        ("opportunities", get_opportunity_service(), OPPORTUNITIES),
        ("resources", get_resource_service(), RESOURCES),
        ("training programs", get_training_program_service(), TRAINING_PROGRAMS),
    ):
        for row in rows:
            service.create(row)
        print(f"    ✅ {len(rows)} {label}")


def seed_goals(student: dict):
    print("\n[3] Adding sample goals...")
    goals = get_goal_service()
    for goal in GOALS:
        goals.create(student["id"], goal)
    print(f"    ✅ {len(GOALS)} goals for {student['email']}")


def main():
    print("=" * 50)
    print("FUTUREFLOW - SEED DATABASE")
    print("=" * 50)

    init_db()

    if get_user_service().get_by_email(ADMIN["email"]):
        print("\n⚠️  Seed data already exists, skipping (run scripts/reset_db.py first)")
        return

    students = seed_users()
    seed_catalog()
    seed_goals(students[0])

    print("\n📋 Credentials:")
    print(f"    Admin:   {ADMIN['email']} / {ADMIN['password']}")
    for student in STUDENTS:
        print(f"    Student: {student['account']['email']} / {student['account']['password']}")

    print("\n" + "=" * 50)
    print("Seeding complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
