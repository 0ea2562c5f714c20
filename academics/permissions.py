from rest_framework.permissions import BasePermission

class IsAdminOrTeacher(BasePermission):
    """Student records are kept by administrators and advisers."""
    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        return user.role in ('admin', 'teacher')
