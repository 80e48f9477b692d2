"""Maps persisted users to their public representations."""

from petconnect.models import Owner
from petconnect.schemas.auth import OwnerProfile


class UserMapper:
    def to_owner_profile(self, owner: Owner) -> OwnerProfile:
        return OwnerProfile(
            id=owner.id,
            username=owner.username,
            email=owner.email,
            roles={role.role_kind.value for role in owner.roles},
            avatar=owner.avatar,
            phone=owner.phone,
        )
