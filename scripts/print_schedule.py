import sys
import os
from datetime import date
from sqlmodel import Session

# Add current directory to path so we can import projecthub
sys.path.append(os.getcwd())

from projecthub.core.config import settings
from projecthub.db.session import engine, init_db
from projecthub.services.progress import budget_percent, project_progress
from projecthub.services.schedule import schedule_layout
from projecthub.services.store import EntityStore


def print_schedule(project_id: str, today: date = None, db_engine=None) -> bool:
    """
    Print a project's rollups and Gantt bars. Returns False for an unknown project.
    """
    db_engine = db_engine or engine
    today = today or settings.today()
    init_db(db_engine)

    with Session(db_engine) as session:
        store = EntityStore(session)
        project = store.find_project(project_id)
        if project is None:
            print(f"Project {project_id} not found.")
            return False

        layout = schedule_layout(store, project, today, settings.GANTT_MIN_BAR_WIDTH)
        print(f"--- {project.code}: {project.name} ---")
        print(f"Progress: {project_progress(store, project.id)}%")
        print(f"Budget used: {budget_percent(project)}%")
        print(f"Window: {layout.window_start} .. {layout.window_end} ({layout.total_days} days)")
        print("Months: " + " | ".join(b.label for b in layout.month_buckets))
        for bar in layout.bars:
            indent = "  " if bar.parent_id else ""
            print(
                f"{indent}{bar.item_id:<5} left={bar.left_percent:6.2f}% "
                f"width={bar.width_percent:6.2f}% fill={bar.fill_percent:3d}%  {bar.label}"
            )
        if layout.today_offset_percent is None:
            print(f"Today ({today}) is outside the window")
        else:
            print(f"Today ({today}) at {layout.today_offset_percent:.2f}%")
    return True


if __name__ == "__main__":
    if not print_schedule(sys.argv[1] if len(sys.argv) > 1 else "p1"):
        sys.exit(1)
