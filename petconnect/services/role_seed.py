"""Seed the role and permission reference data that registration depends on."""

import logging

from sqlalchemy.orm import Session

from petconnect.models import Permission, Role, RoleKind

logger = logging.getLogger(__name__)

# Permission name -> description.
PERMISSIONS: dict[str, str] = {
    "USER_READ_PROFILE_OWN": "Read own profile information.",
    "USER_UPDATE_PROFILE_OWN": "Update own editable profile information.",
    "CLINIC_READ_PUBLIC": "Search and view public clinic information.",
    "CLINIC_UPDATE_OWN": "Update the information of the admin's own clinic.",
    "CLINIC_STAFF_CREATE": "Create Vet or Admin accounts for the admin's own clinic.",
    "CLINIC_STAFF_READ_OWN_CLINIC": "View the staff list of the user's own clinic.",
    "CLINIC_STAFF_UPDATE_OWN_CLINIC": "Update staff members of the admin's own clinic.",
    "CLINIC_STAFF_TOGGLE_ACTIVE_OWN_CLINIC": "Activate or deactivate staff of the admin's own clinic.",
    "PET_CREATE_OWN": "Register a new pet.",
    "PET_READ_OWN": "View own pets.",
    "PET_READ_ASSOCIATED_CLINIC": "View pets associated with the user's clinic.",
    "PET_UPDATE_BASIC_OWN": "Update basic information of own pets.",
    "PET_UPDATE_CLINICAL_ASSOCIATED_CLINIC": "Update clinical information of clinic pets.",
    "PET_ACTIVATE_ASSOCIATED_CLINIC": "Activate a pending pet associated with the clinic.",
    "PET_DEACTIVATE_OWN": "Mark own pet as inactive.",
    "PET_MANAGE_VET_ASSOCIATION_OWN": "Associate or disassociate vets with own pets.",
    "RECORD_CREATE_OWN_INFORMATIVE": "Create informative records for own pets.",
    "RECORD_READ_OWN": "View the medical history of own pets.",
    "RECORD_READ_ASSOCIATED_CLINIC": "View the medical history of clinic pets.",
    "RECORD_UPDATE_OWN_INFORMATIVE": "Edit informative records the owner created.",
    "RECORD_DELETE_OWN_INFORMATIVE": "Delete informative records the owner created.",
    "RECORD_CREATE_ASSOCIATED_CLINIC": "Create clinical records for clinic pets.",
    "RECORD_SIGN_OWN": "Digitally sign a record the vet created.",
    "RECORD_UPDATE_UNSIGNED_OWN_CLINIC": "Edit unsigned records created by clinic staff.",
    "RECORD_DELETE_UNSIGNED_OWN_CLINIC": "Delete unsigned records created by clinic staff.",
    "RECORD_DELETE_SIGNED_OWN": "Delete a signed record not linked to a certificate.",
    "CERTIFICATE_REQUEST_OWN": "Request a certificate for own pet.",
    "CERTIFICATE_GENERATE_ASSOCIATED_CLINIC": "Generate a certificate for a clinic pet.",
    "CERTIFICATE_READ_OWN": "View certificates issued for own pets.",
    "CERTIFICATE_READ_ASSOCIATED_CLINIC": "View certificates of clinic pets.",
    "CERTIFICATE_SHARE_QR_OWN": "Share a QR code that verifies a certificate.",
}

_CLINIC_READ = (
    "USER_READ_PROFILE_OWN",
    "USER_UPDATE_PROFILE_OWN",
    "CLINIC_READ_PUBLIC",
    "CLINIC_STAFF_READ_OWN_CLINIC",
    "PET_READ_ASSOCIATED_CLINIC",
    "PET_UPDATE_CLINICAL_ASSOCIATED_CLINIC",
    "PET_ACTIVATE_ASSOCIATED_CLINIC",
    "RECORD_READ_ASSOCIATED_CLINIC",
    "RECORD_CREATE_ASSOCIATED_CLINIC",
    "RECORD_UPDATE_UNSIGNED_OWN_CLINIC",
    "RECORD_DELETE_UNSIGNED_OWN_CLINIC",
    "CERTIFICATE_READ_ASSOCIATED_CLINIC",
)

ROLE_PERMISSIONS: dict[RoleKind, tuple[str, ...]] = {
    RoleKind.OWNER: (
        "USER_READ_PROFILE_OWN",
        "USER_UPDATE_PROFILE_OWN",
        "CLINIC_READ_PUBLIC",
        "PET_CREATE_OWN",
        "PET_READ_OWN",
        "PET_UPDATE_BASIC_OWN",
        "PET_DEACTIVATE_OWN",
        "PET_MANAGE_VET_ASSOCIATION_OWN",
        "RECORD_CREATE_OWN_INFORMATIVE",
        "RECORD_READ_OWN",
        "RECORD_UPDATE_OWN_INFORMATIVE",
        "RECORD_DELETE_OWN_INFORMATIVE",
        "CERTIFICATE_REQUEST_OWN",
        "CERTIFICATE_READ_OWN",
        "CERTIFICATE_SHARE_QR_OWN",
    ),
    RoleKind.VET: _CLINIC_READ
    + (
        "RECORD_SIGN_OWN",
        "RECORD_DELETE_SIGNED_OWN",
        "CERTIFICATE_GENERATE_ASSOCIATED_CLINIC",
    ),
    RoleKind.ADMIN: _CLINIC_READ
    + (
        "CLINIC_UPDATE_OWN",
        "CLINIC_STAFF_CREATE",
        "CLINIC_STAFF_UPDATE_OWN_CLINIC",
        "CLINIC_STAFF_TOGGLE_ACTIVE_OWN_CLINIC",
    ),
    RoleKind.SUPERUSER: tuple(PERMISSIONS),
}


def seed_roles(session: Session) -> tuple[int, int]:
    """
    Insert missing permissions and roles, and attach each role's permissions.

    Returns (roles_created, permissions_created). Idempotent: safe to run repeatedly.
    """
    existing = {p.name: p for p in session.query(Permission).all()}
    permissions_created = 0
    for name, description in PERMISSIONS.items():
        if name not in existing:
            permission = Permission(name=name, description=description)
            session.add(permission)
            existing[name] = permission
            permissions_created += 1

    roles_created = 0
    for kind, names in ROLE_PERMISSIONS.items():
        role = session.query(Role).filter(Role.role_kind == kind).first()
        if role is None:
            role = Role(role_kind=kind)
            session.add(role)
            roles_created += 1
        granted = {p.name for p in role.permissions}
        for name in names:
            if name not in granted:
                role.permissions.append(existing[name])
    session.commit()

    logger.info(
        "Role seed: roles_created=%s, permissions_created=%s",
        roles_created,
        permissions_created,
    )
    return (roles_created, permissions_created)
