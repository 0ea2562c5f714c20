import logging

from rest_framework import mixins, permissions, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from academics.mixins import ListExportMixin, StoreErrorMixin
from academics.search import NameSearchFilter

from .exceptions import CannotBlockSelf
from .models import User
from .permissions import IsAdmin
from .serializers import EmailTokenObtainPairSerializer, TeacherRecordSerializer, UserSerializer
from .services import ACTION_BLOCK, ACTION_UNBLOCK, set_account_status, update_teacher_assignment

logger = logging.getLogger(__name__)

class LoginView(TokenObtainPairView):
    serializer_class = EmailTokenObtainPairSerializer

class RefreshView(TokenRefreshView):
    pass

class MeView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)


class AccountViewSet(StoreErrorMixin, ListExportMixin, viewsets.ReadOnlyModelViewSet):
    """
    GET  /api/accounts/?search=
    GET  /api/accounts/export/?search=
    POST /api/accounts/{id}/block/
    POST /api/accounts/{id}/unblock/
    """
    queryset = User.objects.all()
    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdmin]
    filter_backends = [NameSearchFilter]
    name_search_fields = ("name",)

    export_columns = ("id", "name", "email", "role", "status")
    export_filename = "user_management.xlsx"
    export_sheet = "Users"

    def _change_status(self, request, action_name):
        account = self.get_object()
        if action_name == ACTION_BLOCK and account.pk == request.user.pk:
            raise CannotBlockSelf()
        account = set_account_status(account.pk, action_name)
        return Response(UserSerializer(account).data)

    @action(detail=True, methods=["post"])
    def block(self, request, pk=None):
        return self._change_status(request, ACTION_BLOCK)

    @action(detail=True, methods=["post"])
    def unblock(self, request, pk=None):
        return self._change_status(request, ACTION_UNBLOCK)


class TeacherRecordViewSet(
    StoreErrorMixin,
    ListExportMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    """
    Teacher records: list/search/export, and reassigning the advisory class
    (grade level + section). Nothing else about a teacher is editable here.
    """
    serializer_class = TeacherRecordSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdmin]
    filter_backends = [NameSearchFilter]
    name_search_fields = ("name",)

    export_columns = ("id", "name", "email", "grade_level", "section", "status")
    export_filename = "teacher_management.xlsx"
    export_sheet = "Teachers"

    def get_queryset(self):
        qs = User.objects.teachers().order_by("name", "id")
        grade_level = self.request.query_params.get("grade_level")
        section = self.request.query_params.get("section")
        if grade_level:
            qs = qs.filter(grade_level=grade_level)
        if section:
            qs = qs.filter(section=section)
        return qs

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        teacher = self.get_object()
        serializer = self.get_serializer(teacher, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        teacher = update_teacher_assignment(
            teacher,
            grade_level=serializer.validated_data.get("grade_level"),
            section=serializer.validated_data.get("section"),
        )
        logger.info("teacher %s assigned to %s / %s", teacher.pk, teacher.grade_level, teacher.section)
        return Response(self.get_serializer(teacher).data)
