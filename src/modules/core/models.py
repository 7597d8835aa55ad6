from django.db import models


class BaseModel(models.Model):
    """Abstract parent of every administered table.

    The integer identity key comes from ``DEFAULT_AUTO_FIELD``; this class
    only adds creation / modification timestamps.
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        # auto_now is skipped unless the column is part of update_fields
        update_fields = kwargs.get("update_fields")
        if update_fields is not None:
            kwargs["update_fields"] = {*update_fields, "updated_at"}
        super().save(*args, **kwargs)
