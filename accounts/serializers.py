from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from academics.constants import GRADE_LEVELS
from .models import User

class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ('id', 'email', 'name', 'role', 'status', 'grade_level', 'section')
        read_only_fields = fields

class TeacherRecordSerializer(serializers.ModelSerializer):
    """Only the advisory class of a teacher is editable from the records screen."""
    grade_level = serializers.ChoiceField(choices=GRADE_LEVELS, required=False, allow_blank=True)
    section = serializers.CharField(max_length=50, required=False, allow_blank=True)

    class Meta:
        model = User
        fields = ('id', 'name', 'email', 'grade_level', 'section', 'status')
        read_only_fields = ('id', 'name', 'email', 'status')

class EmailTokenObtainPairSerializer(TokenObtainPairSerializer):
    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token['role'] = user.role
        token['name'] = user.name
        return token

    def validate(self, attrs):
        email = attrs.get(self.username_field) or attrs.get('username')
        if email:
            attrs[self.username_field] = User.objects.normalize_login(email)
        return super().validate(attrs)
