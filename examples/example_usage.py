"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

from src.hrms.hrms.container import build_container
from src.hrms.hrms.core.enums import Role
from src.hrms.hrms.database.bootstrap import seed_demo_data
from src.hrms.hrms.database.store import InMemoryStore


def main():
    container = build_container(store=InMemoryStore(), secret_key="example-secret")
    seed_demo_data(container)

    login = container.auth_service.authenticate("james@hrms.com", "emp123")
    leave = container.leave_service.create_leave(
        current_role=login.user.role,
        current_user_id=login.user.id,
        payload={"type": "sick", "startDate": "2025-03-01", "endDate": "2025-03-02", "reason": "flu"},
    )
    decided = container.leave_service.patch_status(current_role=Role.ADMIN, request_id=leave.id, status="approved")
    print(decided)


if __name__ == "__main__":
    main()
