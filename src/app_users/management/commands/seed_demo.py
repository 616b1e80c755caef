import json
from pathlib import Path

from django.core.management import BaseCommand, call_command
from django.db import transaction

from app_projects.models import Block, Project, ProjectMember
from app_users.models import User


class Command(BaseCommand):
    help = "Creates demo users (one per role) and a demo project"
    demo_data_file = Path(__file__).resolve().parents[2] / "data" / "demo.json"

    def add_arguments(self, parser):
        parser.add_argument("--password", default="demo12345", help="Password for all demo users")
        parser.add_argument("--no-project", action="store_true", help="Do not create the demo project")
        parser.add_argument("--skip-migrate", action="store_true")

    def handle(self, *args, **options):
        with open(self.demo_data_file, "r", encoding="utf-8") as file:
            data = json.load(file)

        if not options["skip_migrate"]:
            call_command("migrate", verbosity=0)

        with transaction.atomic():
            users = self.create_users(data["users"], options["password"])
            if not options["no_project"]:
                self.create_projects(data["projects"], users)

        self.stdout.write(self.style.SUCCESS("Demo data has been created."))

    def create_users(self, users_data, password):
        users = {}
        for user_data in users_data:
            user, created = User.objects.get_or_create(
                username=user_data["username"],
                defaults={
                    "email": user_data["email"],
                    "role": user_data["role"],
                    "is_staff": user_data.get("is_staff", False),
                    "is_superuser": user_data.get("is_superuser", False),
                },
            )
            if created:
                user.set_password(password)
                user.save(update_fields=["password"])
            users[user.username] = user
            self.stdout.write(f"{'Created' if created else 'Exists'}: {user.username} ({user.role})")
        return users

    def create_projects(self, projects_data, users):
        for project_data in projects_data:
            project, _ = Project.objects.get_or_create(
                name=project_data["name"],
                defaults={
                    "client_name": project_data.get("client_name", ""),
                    "location": project_data.get("location", ""),
                    "description": project_data.get("description", ""),
                },
            )
            for username in project_data.get("members", []):
                ProjectMember.objects.get_or_create(project=project, user=users[username])
            for block_name in project_data.get("blocks", []):
                Block.objects.get_or_create(project=project, name=block_name)
            self.stdout.write(f"Project: {project.name} (id={project.id})")
