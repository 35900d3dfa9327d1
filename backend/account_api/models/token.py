# account_api/models/token.py
from tortoise import fields, models

class AuthToken(models.Model):
    """
    Session token issued at login/signup.
    - token_hash: sha256(plain token) 64-character hexadecimal string, unique (plain text not stored)
    - user: Owner of the session; a user may hold several tokens at once
    - created_at: Issue time (no server-side expiry, the cookie Max-Age bounds the session)
    """
    id = fields.IntField(pk=True)
    token_hash = fields.CharField(max_length=64, unique=True, index=True)
    user = fields.ForeignKeyField(
        "models.User", related_name="tokens", on_delete=fields.CASCADE
    )
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "auth_tokens"
