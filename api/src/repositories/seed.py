"""Sample records loaded into a fresh store at startup."""

from typing import List

from api.src.models.task import Task, TaskStatus
from api.src.models.user import User


def seed_users() -> List[User]:
    """Return the sample users. IDs are intentionally out of order."""
    return [
        User(id=1, username="some_guy", full_name="Guy Bernfeld"),
        User(id=6, username="other_guy", full_name="Yogev Gabay"),
        User(id=2, username="jane_doe", full_name="Jane Doe"),
        User(id=3, username="john_smith", full_name="John Smith"),
        User(id=4, username="alice_wonder", full_name="Alice Wonderland"),
        User(id=5, username="bob_builder", full_name="Bob Builder"),
    ]


def seed_tasks() -> List[Task]:
    """Return the sample tasks."""
    return [
        Task(
            id=1,
            title="Setup CI/CD Pipeline",
            description="Configure automated build and deployment pipeline using GitHub Actions.",
            status=TaskStatus.TODO,
            assignee_id=2,
        ),
        Task(
            id=2,
            title="Provision Kubernetes Cluster",
            description="Create and configure a production-ready Kubernetes cluster on cloud.",
            status=TaskStatus.IN_PROGRESS,
            assignee_id=3,
        ),
        Task(
            id=3,
            title="Implement Monitoring",
            description="Integrate Prometheus and Grafana for system monitoring and alerting.",
            status=TaskStatus.TODO,
            assignee_id=4,
        ),
        Task(
            id=4,
            title="Containerize Application",
            description="Dockerize all microservices and update deployment manifests.",
            status=TaskStatus.DONE,
            assignee_id=1,
        ),
        Task(
            id=5,
            title="Configure Secrets Management",
            description="Set up Vault for secure storage and retrieval of secrets.",
            status=TaskStatus.IN_PROGRESS,
            assignee_id=2,
        ),
    ]
