from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import AccountViewSet, LoginView, MeView, RefreshView, TeacherRecordViewSet

router = SimpleRouter()
router.register('accounts', AccountViewSet, basename='account')
router.register('teachers', TeacherRecordViewSet, basename='teacher')

urlpatterns = [
    path('auth/login/', LoginView.as_view(), name='login'),
    path('auth/refresh/', RefreshView.as_view(), name='refresh'),
    path('auth/me/', MeView.as_view(), name='me'),
    path('', include(router.urls)),
]
