from enum import Enum


class ModderType(str, Enum):
    FULL = "full"  # full BN
    PROBATION = "probation"  # probation BN
    MODDER = "modder"  # non-BN modder

    @property
    def is_bn(self) -> bool:
        return self in (ModderType.FULL, ModderType.PROBATION)


class RequestStatus(str, Enum):
    PENDING = "Pending"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    MODDED = "Modded"
    NOMINATED = "Nominated"
    RANKED = "Ranked"
    CUSTOM = "Custom"

    @classmethod
    def classify(cls, value: str | None) -> "RequestStatus":
        """Map free-text moderation status to a known kind, or CUSTOM."""
        if not value:
            return cls.CUSTOM
        for member in cls:
            if member is not cls.CUSTOM and member.value.lower() == value.strip().lower():
                return member
        return cls.CUSTOM
