from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

User = get_user_model()


# ---------------- CREATE (ADMIN ONLY) ----------------
class UserCreateSerializer(serializers.ModelSerializer):
    username = serializers.CharField(min_length=3, max_length=150)
    password = serializers.CharField(
        write_only=True,
        min_length=6,
        validators=[validate_password],
        style={"input_type": "password"},
    )
    role = serializers.ChoiceField(choices=User.ROLE_CHOICES)

    class Meta:
        model = User
        fields = ["username", "password", "name", "role"]

    def validate_username(self, value):
        value = value.strip()
        if User.objects.filter(username__iexact=value).exists():
            raise serializers.ValidationError("Username already exists")
        return value

    def create(self, validated_data):
        return User.objects.create_user(
            username=validated_data["username"],
            password=validated_data["password"],
            name=validated_data.get("name", ""),
            role=validated_data["role"],
        )


# ---------------- LOGIN (INPUT ONLY) ----------------
class LoginSerializer(serializers.Serializer):
    """
    Input validation only.
    Authentication is handled in the view.
    """
    username = serializers.CharField()
    password = serializers.CharField(
        write_only=True,
        style={"input_type": "password"},
    )


class LoginResponseSerializer(serializers.Serializer):
    access = serializers.CharField()
    refresh = serializers.CharField()
    username = serializers.CharField()
    name = serializers.CharField()
    role = serializers.CharField()


# ---------------- USER OUTPUT ----------------
class UserSerializer(serializers.ModelSerializer):
    """
    Safe user representation for frontend consumption.
    """
    class Meta:
        model = User
        fields = ["id", "username", "name", "role"]
