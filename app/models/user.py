from tortoise import fields
from .base import BaseModel

class User(BaseModel):
    email = fields.CharField(max_length=255, unique=True, index=True)
    name = fields.CharField(max_length=255)
    password_hash = fields.CharField(max_length=255)
    is_admin = fields.BooleanField(default=False)

    class Meta:
        table = "users"
