from django.contrib.auth.base_user import AbstractBaseUser
from django.contrib.auth.models import PermissionsMixin
from django.db import models

from .managers import UserManager


class User(AbstractBaseUser, PermissionsMixin):
    ROLE_ADMIN = 'admin'
    ROLE_TEACHER = 'teacher'
    ROLE_STUDENT = 'student'
    ROLES = (
        (ROLE_ADMIN, 'Administrator'),
        (ROLE_TEACHER, 'Teacher'),
        (ROLE_STUDENT, 'Student / Guardian'),
    )

    STATUS_ACTIVE = 'Active'
    STATUS_BLOCKED = 'Blocked'
    STATUSES = (
        (STATUS_ACTIVE, 'Active'),
        (STATUS_BLOCKED, 'Blocked'),
    )

    email = models.EmailField(unique=True)
    name = models.CharField(max_length=150, blank=True)
    role = models.CharField(max_length=20, choices=ROLES, default=ROLE_STUDENT)
    status = models.CharField(max_length=10, choices=STATUSES, default=STATUS_ACTIVE)

    # advisory class handled by a teacher
    grade_level = models.CharField(max_length=20, blank=True)
    section = models.CharField(max_length=50, blank=True)

    is_staff = models.BooleanField(default=False)
    date_joined = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        ordering = ['name', 'id']
        indexes = [
            models.Index(fields=['role', 'status'], name='acc_user_role_status_idx'),
        ]

    def __str__(self):
        return f"{self.name or self.email} ({self.role})"

    @property
    def is_active(self):
        # status is the single source of truth; auth backends and simplejwt
        # both consult is_active before letting a user in.
        # Not a column: querysets filter on status, never is_active, so
        # PasswordResetForm and ModelBackend.with_perm cannot be used as-is.
        return self.status == self.STATUS_ACTIVE

    @property
    def is_blocked(self):
        return self.status == self.STATUS_BLOCKED
