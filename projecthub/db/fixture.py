"""
Demo Fixture Module

The complete ProjectHub data set. It is loaded once into the in-memory database
at startup (see projecthub.db.session.init_db) and never written afterwards.
"""
import logging
from datetime import date, datetime, timedelta
from functools import lru_cache

from sqlmodel import Session

from projecthub.core.security import get_password_hash
from projecthub.models import (
    User, UserRole,
    Project, ProjectStatus, HealthStatus, ProjectType, ProjectLevel,
    Milestone, MilestoneStatus, MilestoneBaseline,
    Task, TaskStatus, TaskPriority, TaskLog,
    Risk, RiskImpact, RiskStatus,
    DelayRequest, DelayRequestStatus,
    Draft, Notification, NotificationType,
)

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "demo"

# (id, email, name, role, department)
USERS = [
    ("u1", "pm@demo.com", "Wang PM", UserRole.PM, "Project Management Office"),
    ("u2", "member1@demo.com", "Li Member", UserRole.MEMBER, "R&D"),
    ("u3", "member2@demo.com", "Zhang Member", UserRole.MEMBER, "Design"),
    ("u4", "exec@demo.com", "Chen Executive", UserRole.EXECUTIVE, "Management"),
]

PROJECTS = [
    dict(
        id="p1", name="E-commerce Platform Revamp", code="EC-2026",
        type=ProjectType.INTERNAL, level=ProjectLevel.HIGH,
        status=ProjectStatus.IN_PROGRESS, health_status=HealthStatus.GREEN,
        start_date=date(2026, 1, 15), end_date=date(2026, 6, 30),
        budget=2000000, budget_used=750000, owner_id="u1",
        smart_goals={
            "S": "Rebuild the storefront and back office of the e-commerce platform",
            "M": "Raise conversion by 30% and bring page load under 2 seconds",
            "A": "The team has shipped e-commerce work before on a mature stack",
            "R": "Supports the digital transformation strategy and online sales",
            "T": "Live by 30 June 2026",
        },
        description="Full UI/UX overhaul of the existing e-commerce platform.",
    ),
    dict(
        id="p2", name="CRM System Build", code="CRM-2026",
        type=ProjectType.INTERNAL, level=ProjectLevel.HIGH,
        status=ProjectStatus.IN_PROGRESS, health_status=HealthStatus.YELLOW,
        start_date=date(2026, 2, 1), end_date=date(2026, 5, 31),
        budget=1500000, budget_used=680000, owner_id="u1",
        smart_goals={
            "S": "Deliver a CRM with customer records, sales funnel and reporting",
            "M": "Follow-up efficiency up 50%, sales cycle down 20%",
            "A": "Technical evaluation finished and the team is staffed",
            "R": "Removes the sales team's customer tracking pain points",
            "T": "MVP in trial operation by 31 May 2026",
        },
        description="Enterprise customer relationship management system.",
    ),
    dict(
        id="p3", name="Mobile App Development", code="APP-2026",
        type=ProjectType.EXTERNAL, level=ProjectLevel.MEDIUM,
        status=ProjectStatus.PLANNING, health_status=HealthStatus.GREEN,
        start_date=date(2026, 3, 1), end_date=date(2026, 6, 15),
        budget=1200000, budget_used=120000, owner_id="u1",
        smart_goals={
            "S": "Build native iOS and Android applications",
            "M": "10,000 downloads in the first month",
            "A": "External partner team has React Native experience",
            "R": "Grows the mobile user base and brand reach",
            "T": "In both app stores by 15 June 2026",
        },
        description="Cross-platform mobile application for iOS and Android.",
    ),
    dict(
        id="p4", name="AI Customer Service Research", code="AI-2026",
        type=ProjectType.RESEARCH, level=ProjectLevel.LOW,
        status=ProjectStatus.IN_PROGRESS, health_status=HealthStatus.RED,
        start_date=date(2026, 1, 10), end_date=date(2026, 4, 30),
        budget=800000, budget_used=620000, owner_id="u1",
        smart_goals={
            "S": "Validate the feasibility of an AI customer service agent",
            "M": "Automatic reply accuracy of at least 85%",
            "A": "API access granted, data set in preparation",
            "R": "Cuts support staffing cost by 40% and speeds up replies",
            "T": "Proof of concept finished by 30 April 2026",
        },
        description="Proof of concept for an LLM-based customer service system.",
    ),
    dict(
        id="p5", name="Internal Knowledge Base", code="KB-2026",
        type=ProjectType.INTERNAL, level=ProjectLevel.MEDIUM,
        status=ProjectStatus.COMPLETED, health_status=HealthStatus.GREEN,
        start_date=date(2026, 1, 5), end_date=date(2026, 3, 15),
        budget=500000, budget_used=480000, owner_id="u1",
        smart_goals={
            "S": "Stand up an internal knowledge management platform",
            "M": "90% of documents centralised, 80% search hit rate",
            "A": "Open-source base plus custom development",
            "R": "Reduces knowledge loss and speeds up onboarding",
            "T": "Fully live by 15 March 2026",
        },
        description="Unified knowledge base for every department's documents.",
    ),
]

# (id, project_id, name, description, start, due, status, progress)
MILESTONES = [
    ("m1", "p1", "Requirements & Design", "Interviews and UI/UX designs", date(2026, 1, 15), date(2026, 2, 28), MilestoneStatus.COMPLETED, 100),
    ("m2", "p1", "Frontend Development", "All storefront pages", date(2026, 3, 1), date(2026, 4, 30), MilestoneStatus.IN_PROGRESS, 45),
    ("m3", "p1", "Backend API Development", "API design and implementation", date(2026, 3, 15), date(2026, 5, 15), MilestoneStatus.IN_PROGRESS, 30),
    ("m4", "p2", "Database Design", "ERD and database setup", date(2026, 2, 1), date(2026, 2, 28), MilestoneStatus.COMPLETED, 100),
    ("m5", "p2", "Core Modules", "Customer management and sales funnel", date(2026, 3, 1), date(2026, 4, 15), MilestoneStatus.IN_PROGRESS, 60),
    ("m6", "p2", "Reporting & Analytics", "Sales reports and customer dashboards", date(2026, 4, 1), date(2026, 5, 15), MilestoneStatus.PENDING, 0),
    ("m7", "p3", "Prototype Design", "App prototype and interaction design", date(2026, 3, 1), date(2026, 3, 31), MilestoneStatus.IN_PROGRESS, 20),
    ("m8", "p3", "Frontend Development", "React Native screens", date(2026, 4, 1), date(2026, 5, 31), MilestoneStatus.PENDING, 0),
    ("m9", "p4", "Data Collection & Labelling", "Collect and label support transcripts", date(2026, 1, 10), date(2026, 2, 15), MilestoneStatus.COMPLETED, 100),
    ("m10", "p4", "Model Training & Tuning", "Fine-tune the language model", date(2026, 2, 16), date(2026, 3, 31), MilestoneStatus.OVERDUE, 70),
    ("m11", "p4", "POC Validation", "Proof of concept and evaluation", date(2026, 4, 1), date(2026, 4, 30), MilestoneStatus.PENDING, 0),
    ("m12", "p5", "Platform Setup", "Architecture and infrastructure", date(2026, 1, 5), date(2026, 1, 31), MilestoneStatus.COMPLETED, 100),
    ("m13", "p5", "Content Migration", "Move existing documents to the platform", date(2026, 2, 1), date(2026, 2, 28), MilestoneStatus.COMPLETED, 100),
    ("m14", "p5", "Launch & Rollout", "Go live and train staff", date(2026, 3, 1), date(2026, 3, 15), MilestoneStatus.COMPLETED, 100),
]

# (id, milestone_id, project_id, title, description, status, priority, assignee, start, due, est, actual)
TASKS = [
    ("t1", "m1", "p1", "User interviews", "Run 10 user interviews", TaskStatus.DONE, TaskPriority.HIGH, "u1", date(2026, 1, 15), date(2026, 1, 31), 40, 38),
    ("t2", "m1", "p1", "UI mockups", "Home and product page designs", TaskStatus.DONE, TaskPriority.HIGH, "u3", date(2026, 2, 1), date(2026, 2, 15), 60, 55),
    ("t3", "m1", "p1", "Design review", "Review designs with stakeholders", TaskStatus.DONE, TaskPriority.MEDIUM, "u3", date(2026, 2, 16), date(2026, 2, 28), 20, 25),
    ("t4", "m2", "p1", "Home page components", "Banner, recommendations, category nav", TaskStatus.DONE, TaskPriority.HIGH, "u2", date(2026, 3, 1), date(2026, 3, 15), 40, 42),
    ("t5", "m2", "p1", "Product list page", "Filtering, sorting, pagination", TaskStatus.IN_PROGRESS, TaskPriority.HIGH, "u2", date(2026, 3, 16), date(2026, 3, 31), 35, 20),
    ("t6", "m2", "p1", "Product detail page", "Product info, gallery, variant picker", TaskStatus.TODO, TaskPriority.MEDIUM, "u2", date(2026, 4, 1), date(2026, 4, 15), 30, 0),
    ("t7", "m2", "p1", "Cart and checkout", "Cart CRUD and checkout page", TaskStatus.TODO, TaskPriority.HIGH, "u2", date(2026, 4, 16), date(2026, 4, 30), 45, 0),
    ("t8", "m3", "p1", "API architecture", "RESTful API specification", TaskStatus.DONE, TaskPriority.HIGH, "u2", date(2026, 3, 15), date(2026, 3, 22), 16, 14),
    ("t9", "m3", "p1", "Product API", "CRUD, search and pagination", TaskStatus.IN_PROGRESS, TaskPriority.HIGH, "u2", date(2026, 3, 23), date(2026, 4, 10), 30, 15),
    ("t10", "m3", "p1", "Order API", "Orders, payment and shipping flow", TaskStatus.TODO, TaskPriority.MEDIUM, "u2", date(2026, 4, 11), date(2026, 5, 1), 40, 0),
    ("t11", "m5", "p2", "Customer records CRUD", "Create, edit, search, delete customers", TaskStatus.DONE, TaskPriority.HIGH, "u2", date(2026, 3, 1), date(2026, 3, 15), 30, 28),
    ("t12", "m5", "p2", "Sales funnel module", "Opportunity and stage tracking", TaskStatus.IN_PROGRESS, TaskPriority.HIGH, "u2", date(2026, 3, 16), date(2026, 4, 1), 35, 18),
    ("t13", "m5", "p2", "Contact history", "Calls, email and visit records", TaskStatus.REVIEW, TaskPriority.MEDIUM, "u3", date(2026, 3, 20), date(2026, 4, 5), 25, 22),
    ("t14", "m5", "p2", "Customer tags", "Custom tags and categories", TaskStatus.TODO, TaskPriority.LOW, "u3", date(2026, 4, 6), date(2026, 4, 15), 15, 0),
    ("t15", "m7", "p3", "App wireframes", "Wireframes for the main screens", TaskStatus.IN_PROGRESS, TaskPriority.HIGH, "u3", date(2026, 3, 1), date(2026, 3, 15), 30, 12),
    ("t16", "m7", "p3", "Interactive prototype", "Clickable Figma prototype", TaskStatus.TODO, TaskPriority.MEDIUM, "u3", date(2026, 3, 16), date(2026, 3, 31), 25, 0),
    ("t17", "m7", "p3", "Prototype user testing", "Test with 5 users", TaskStatus.TODO, TaskPriority.MEDIUM, "u1", date(2026, 3, 25), date(2026, 3, 31), 15, 0),
    ("t18", "m10", "p4", "Training data preprocessing", "Clean and format training data", TaskStatus.DONE, TaskPriority.HIGH, "u2", date(2026, 2, 16), date(2026, 2, 28), 30, 35),
    ("t19", "m10", "p4", "Model fine-tuning", "Fine-tune through the model API", TaskStatus.BLOCKED, TaskPriority.HIGH, "u2", date(2026, 3, 1), date(2026, 3, 20), 40, 30),
    ("t20", "m10", "p4", "Evaluation report", "A/B tests and accuracy evaluation", TaskStatus.TODO, TaskPriority.MEDIUM, "u2", date(2026, 3, 21), date(2026, 3, 31), 20, 0),
]

# (id, task_id, user_id, action, detail, timestamp)
TASK_LOGS = [
    ("tl1", "t5", "u2", "status_change", "Status changed from To do to In progress", datetime(2026, 3, 16, 9, 0)),
    ("tl2", "t5", "u2", "comment", "Filtering done, sorting in progress", datetime(2026, 3, 18, 14, 30)),
    ("tl3", "t9", "u2", "status_change", "Status changed from To do to In progress", datetime(2026, 3, 23, 10, 0)),
    ("tl4", "t12", "u2", "status_change", "Status changed from To do to In progress", datetime(2026, 3, 16, 8, 30)),
    ("tl5", "t13", "u3", "status_change", "Status changed from In progress to Review", datetime(2026, 4, 2, 16, 0)),
    ("tl6", "t15", "u3", "comment", "5 wireframes done, 3 to go", datetime(2026, 3, 10, 11, 0)),
    ("tl7", "t19", "u2", "status_change", "Status changed from In progress to Blocked", datetime(2026, 3, 15, 9, 0)),
    ("tl8", "t19", "u2", "comment", "API quota exhausted, waiting for approval", datetime(2026, 3, 15, 9, 5)),
    ("tl9", "t4", "u2", "status_change", "Status changed from In progress to Done", datetime(2026, 3, 14, 17, 0)),
    ("tl10", "t11", "u2", "status_change", "Status changed from In progress to Done", datetime(2026, 3, 14, 18, 0)),
    ("tl11", "t1", "u1", "comment", "Interview notes compiled, 47 requirements collected", datetime(2026, 1, 30, 16, 0)),
    ("tl12", "t18", "u2", "status_change", "Status changed from In progress to Done", datetime(2026, 2, 27, 17, 30)),
]

RISKS = [
    dict(id="r1", project_id="p1", title="Frontend technical debt",
         description="Legacy code not fully refactored may slow new features",
         impact=RiskImpact.MEDIUM, probability=0.6, status=RiskStatus.MITIGATING,
         mitigation="Tech-debt sprint every two weeks", owner_id="u2",
         created_at=datetime(2026, 2, 10, 10, 0)),
    dict(id="r2", project_id="p2", title="Scope creep",
         description="Sales keeps adding feature requests, risking delay",
         impact=RiskImpact.HIGH, probability=0.7, status=RiskStatus.OPEN,
         mitigation="Change request process and a requirements freeze date", owner_id="u1",
         created_at=datetime(2026, 2, 20, 14, 0)),
    dict(id="r3", project_id="p4", title="Insufficient API quota",
         description="Model API usage exceeded plan and blocks training",
         impact=RiskImpact.CRITICAL, probability=0.9, status=RiskStatus.OPEN,
         mitigation="Request more quota or switch to an open-source model", owner_id="u2",
         created_at=datetime(2026, 3, 15, 9, 0)),
    dict(id="r4", project_id="p3", title="External team communication lag",
         description="Time zone gap with the partner team raises coordination cost",
         impact=RiskImpact.MEDIUM, probability=0.5, status=RiskStatus.MITIGATING,
         mitigation="Three fixed video calls a week and shared documents", owner_id="u1",
         created_at=datetime(2026, 3, 5, 11, 0)),
    dict(id="r5", project_id="p1", title="Payment gateway integration",
         description="Payment API changes may break checkout",
         impact=RiskImpact.HIGH, probability=0.4, status=RiskStatus.OPEN,
         mitigation="Confirm the API change schedule with the provider", owner_id="u2",
         created_at=datetime(2026, 3, 1, 10, 0)),
    dict(id="r6", project_id="p2", title="Data migration",
         description="Inconsistent legacy formats may drop records",
         impact=RiskImpact.HIGH, probability=0.5, status=RiskStatus.MITIGATING,
         mitigation="Validation scripts and three migration rehearsals", owner_id="u2",
         created_at=datetime(2026, 2, 25, 13, 0)),
    dict(id="r7", project_id="p4", title="Model accuracy below target",
         description="Reply accuracy may miss the 85% goal",
         impact=RiskImpact.CRITICAL, probability=0.6, status=RiskStatus.OPEN,
         mitigation="More training data and a human review step", owner_id="u2",
         created_at=datetime(2026, 3, 10, 15, 0)),
    dict(id="r8", project_id="p1", title="Staffing shortage",
         description="Frontend engineers are shared across projects",
         impact=RiskImpact.MEDIUM, probability=0.5, status=RiskStatus.ACCEPTED,
         mitigation="Reprioritise work, outsource if needed", owner_id="u1",
         created_at=datetime(2026, 2, 15, 9, 0)),
]

DELAY_REQUESTS = [
    dict(id="dr1", task_id="t5", project_id="p1", requester_id="u2",
         reason="Product list filtering is more complex than expected",
         original_due_date=date(2026, 3, 31), requested_due_date=date(2026, 4, 10),
         status=DelayRequestStatus.PENDING, reviewer_id=None, review_comment=None,
         created_at=datetime(2026, 3, 28, 10, 0)),
    dict(id="dr2", task_id="t19", project_id="p4", requester_id="u2",
         reason="Training paused by API quota limits",
         original_due_date=date(2026, 3, 20), requested_due_date=date(2026, 4, 5),
         status=DelayRequestStatus.APPROVED, reviewer_id="u1",
         review_comment="Quota issue confirmed, delay approved",
         created_at=datetime(2026, 3, 16, 9, 0)),
    dict(id="dr3", task_id="t13", project_id="p2", requester_id="u3",
         reason="Design changes require frontend adjustments",
         original_due_date=date(2026, 4, 5), requested_due_date=date(2026, 4, 12),
         status=DelayRequestStatus.PENDING, reviewer_id=None, review_comment=None,
         created_at=datetime(2026, 4, 3, 14, 0)),
    dict(id="dr4", task_id="t15", project_id="p3", requester_id="u3",
         reason="Late user interviews changed the design direction",
         original_due_date=date(2026, 3, 15), requested_due_date=date(2026, 3, 22),
         status=DelayRequestStatus.APPROVED, reviewer_id="u4",
         review_comment="Reasonable, please speed up",
         created_at=datetime(2026, 3, 12, 11, 0)),
    dict(id="dr5", task_id="t10", project_id="p1", requester_id="u2",
         reason="Waiting on updated payment API documentation",
         original_due_date=date(2026, 5, 1), requested_due_date=date(2026, 5, 15),
         status=DelayRequestStatus.REJECTED, reviewer_id="u1",
         review_comment="Build against the current API and upgrade later",
         created_at=datetime(2026, 4, 25, 10, 0)),
]

DRAFTS = [
    dict(id="d1", project_id="p3", title="App functional spec (draft)",
         content="## Features\n\n### 1. Home\n- Recommended content\n- Shortcuts\n\n"
                 "### 2. Search\n- Keyword search\n- Filters\n\n(to be completed)",
         author_id="u1", updated_at=datetime(2026, 3, 8, 15, 0)),
    dict(id="d2", project_id=None, title="Q2 planning (draft)",
         content="## Q2 planning\n\n### Priorities\n1. E-commerce revamp\n2. CRM launch\n"
                 "3. App core phase\n\n### Resourcing\n(in progress)",
         author_id="u1", updated_at=datetime(2026, 3, 15, 9, 30)),
]

NOTIFICATIONS = [
    dict(id="n1", user_id="u1", title="Delay request awaiting review",
         message="Li Member requested a delay for \"Product list page\"",
         type=NotificationType.WARNING, read=False,
         created_at=datetime(2026, 3, 28, 10, 0), link="/delay-requests"),
    dict(id="n2", user_id="u1", title="Milestone due soon",
         message="\"Frontend Development\" is due 2026-04-30, currently 45%",
         type=NotificationType.WARNING, read=False,
         created_at=datetime(2026, 3, 27, 8, 0), link="/projects/p1"),
    dict(id="n3", user_id="u2", title="Task moved to review",
         message="\"Contact history\" is now in review",
         type=NotificationType.INFO, read=True,
         created_at=datetime(2026, 4, 2, 16, 0), link="/projects/p2"),
    dict(id="n4", user_id="u1", title="Risk alert",
         message="\"AI Customer Service Research\" health turned red",
         type=NotificationType.ERROR, read=False,
         created_at=datetime(2026, 3, 15, 9, 10), link="/projects/p4"),
    dict(id="n5", user_id="u4", title="Monthly report generated",
         message="The March 2026 progress report is ready",
         type=NotificationType.SUCCESS, read=True,
         created_at=datetime(2026, 4, 1, 0, 0), link="/reports"),
]

# Baseline revisions recorded for the first three milestones of each project:
# (snapshot name, snapshot date, days added to the milestone due date)
BASELINE_REVISIONS = [
    ("Initial baseline v1.0", date(2026, 1, 20), 0),
    ("First revision v1.1", date(2026, 2, 15), 0),
    ("Second revision v1.2", date(2026, 3, 1), -5),
]


@lru_cache(maxsize=1)
def _demo_password_hash() -> str:
    return get_password_hash(DEMO_PASSWORD)


def build_baselines(milestones):
    """
    Derive baseline snapshots from a project's milestones (fixture order).

    Only the first len(BASELINE_REVISIONS) milestones get a baseline. A
    completed milestone is recorded as finishing on its due date.
    """
    baselines = []
    for i, (milestone, revision) in enumerate(zip(milestones, BASELINE_REVISIONS)):
        name, snapshot_at, shift = revision
        baselines.append(MilestoneBaseline(
            id=f"{milestone.project_id}-bl{i + 1}",
            project_id=milestone.project_id,
            milestone_id=milestone.id,
            snapshot_name=name,
            snapshot_at=snapshot_at,
            planned_end=milestone.due_date + timedelta(days=shift),
            actual_end=milestone.due_date if milestone.status == MilestoneStatus.COMPLETED else None,
        ))
    return baselines


def load_fixture(session: Session) -> None:
    """
    Insert the full demo data set into an empty database and commit.
    """
    password_hash = _demo_password_hash()
    session.add_all(
        User(id=uid, email=email, name=name, role=role, department=dept, password=password_hash)
        for uid, email, name, role, dept in USERS
    )
    session.add_all(Project(**row) for row in PROJECTS)

    milestones = [
        Milestone(
            id=mid, project_id=pid, name=name, description=desc,
            start_date=start, due_date=due, status=status, progress=progress,
            position=position,
        )
        for position, (mid, pid, name, desc, start, due, status, progress) in enumerate(MILESTONES)
    ]
    session.add_all(milestones)

    session.add_all(
        Task(
            id=tid, milestone_id=mid, project_id=pid, title=title, description=desc,
            status=status, priority=priority, assignee_id=assignee,
            start_date=start, due_date=due, estimated_hours=est, actual_hours=actual,
            position=position,
        )
        for position, (tid, mid, pid, title, desc, status, priority, assignee, start, due, est, actual)
        in enumerate(TASKS)
    )
    session.add_all(
        TaskLog(id=lid, task_id=tid, user_id=uid, action=action, detail=detail, timestamp=ts)
        for lid, tid, uid, action, detail, ts in TASK_LOGS
    )

    for project in PROJECTS:
        own = [m for m in milestones if m.project_id == project["id"]]
        session.add_all(build_baselines(own))

    session.add_all(Risk(**row) for row in RISKS)
    session.add_all(DelayRequest(**row) for row in DELAY_REQUESTS)
    session.add_all(Draft(**row) for row in DRAFTS)
    session.add_all(Notification(**row) for row in NOTIFICATIONS)
    session.commit()

    logger.info(
        "Loaded fixture: %d users, %d projects, %d milestones, %d tasks",
        len(USERS), len(PROJECTS), len(MILESTONES), len(TASKS),
    )
