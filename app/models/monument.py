from tortoise import fields
from .base import BaseModel

UNVERIFIED = 0
VERIFIED = 1


class Monument(BaseModel):
    title = fields.CharField(max_length=255)
    short_description = fields.TextField()
    long_description = fields.TextField()
    place = fields.CharField(max_length=255)
    state = fields.CharField(max_length=255)
    importance = fields.TextField(default="")
    past_condition = fields.TextField(default="")
    present_condition = fields.TextField(default="")
    architectural_importance = fields.TextField(default="")
    # "latitude,longitude" or empty
    location = fields.CharField(max_length=64, default="")
    status = fields.IntField(default=UNVERIFIED, index=True)
    user = fields.ForeignKeyField("models.User", related_name="monuments", on_delete=fields.CASCADE)

    class Meta:
        table = "monuments"
        ordering = ["created_at"]

    @property
    def is_verified(self) -> bool:
        return self.status == VERIFIED
