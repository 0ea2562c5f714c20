from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import StudentRecordViewSet

router = DefaultRouter()
router.register('students', StudentRecordViewSet, basename='student')

urlpatterns = [
    path('', include(router.urls)),
]
