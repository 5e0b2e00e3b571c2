"""
Entity Store

Read-only access to the fixture tables. Single-entity lookups return None for
unknown ids and collection lookups return an empty list; callers routinely probe
optional relations (a task's assignee, a draft's project) so nothing here raises.
"""
from typing import Iterable, List, Optional

from sqlmodel import Session, select

from projecthub.models import (
    User, Project, ProjectStatus, Milestone, MilestoneBaseline, Task, TaskLog,
    Risk, DelayRequest, Draft, Notification,
)


class EntityStore:
    """
    Lookup and filter accessors over one database session.

    Nothing is cached: every call reads the current rows, so derived values
    such as project progress always reflect the latest task states.
    """

    def __init__(self, session: Session):
        self.session = session

    # --- single-entity lookups ---

    def find_user(self, user_id: str) -> Optional[User]:
        return self.session.get(User, user_id)

    def find_user_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.email == email)).first()

    def find_project(self, project_id: str) -> Optional[Project]:
        return self.session.get(Project, project_id)

    def find_milestone(self, milestone_id: str) -> Optional[Milestone]:
        return self.session.get(Milestone, milestone_id)

    def find_task(self, task_id: str) -> Optional[Task]:
        return self.session.get(Task, task_id)

    # --- projects ---

    def list_projects(
        self, status: Optional[ProjectStatus] = None, search: Optional[str] = None
    ) -> List[Project]:
        """
        List projects, optionally filtered by status and by a case-insensitive
        substring of the name or code.
        """
        statement = select(Project)
        if status is not None:
            statement = statement.where(Project.status == status)
        projects = list(self.session.exec(statement).all())
        if search:
            needle = search.lower()
            projects = [
                p for p in projects
                if needle in p.name.lower() or needle in p.code.lower()
            ]
        return projects

    # --- milestones and tasks (fixture order) ---

    def list_milestones(self) -> List[Milestone]:
        return list(self.session.exec(select(Milestone).order_by(Milestone.position)).all())

    def milestones_of(self, project_id: str) -> List[Milestone]:
        statement = (
            select(Milestone)
            .where(Milestone.project_id == project_id)
            .order_by(Milestone.position)
        )
        return list(self.session.exec(statement).all())

    def tasks_by_milestone(self, milestone_id: str) -> List[Task]:
        statement = select(Task).where(Task.milestone_id == milestone_id).order_by(Task.position)
        return list(self.session.exec(statement).all())

    def tasks_by_project(self, project_id: str) -> List[Task]:
        statement = select(Task).where(Task.project_id == project_id).order_by(Task.position)
        return list(self.session.exec(statement).all())

    def tasks_assigned_to(self, user_id: str) -> List[Task]:
        statement = select(Task).where(Task.assignee_id == user_id).order_by(Task.position)
        return list(self.session.exec(statement).all())

    def task_logs_for(self, task_ids: Iterable[str]) -> List[TaskLog]:
        ids = list(task_ids)
        if not ids:
            return []
        return list(self.session.exec(select(TaskLog).where(TaskLog.task_id.in_(ids))).all())

    def baselines_of(self, project_id: str) -> List[MilestoneBaseline]:
        statement = (
            select(MilestoneBaseline)
            .where(MilestoneBaseline.project_id == project_id)
            .order_by(MilestoneBaseline.snapshot_at)
        )
        return list(self.session.exec(statement).all())

    # --- risks, delay requests, drafts, notifications ---

    def list_risks(self) -> List[Risk]:
        return list(self.session.exec(select(Risk)).all())

    def risks_of(self, project_id: str) -> List[Risk]:
        return list(self.session.exec(select(Risk).where(Risk.project_id == project_id)).all())

    def list_delay_requests(self, requester_id: Optional[str] = None) -> List[DelayRequest]:
        statement = select(DelayRequest)
        if requester_id is not None:
            statement = statement.where(DelayRequest.requester_id == requester_id)
        return list(self.session.exec(statement).all())

    def delay_requests_of(self, project_id: str) -> List[DelayRequest]:
        statement = select(DelayRequest).where(DelayRequest.project_id == project_id)
        return list(self.session.exec(statement).all())

    def drafts_by(self, author_id: str) -> List[Draft]:
        statement = (
            select(Draft)
            .where(Draft.author_id == author_id)
            .order_by(Draft.updated_at.desc())
        )
        return list(self.session.exec(statement).all())

    def notifications_for(self, user_id: str) -> List[Notification]:
        statement = (
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc())
        )
        return list(self.session.exec(statement).all())
