from enum import Enum


class AccountRole(str, Enum):
    ADMIN = "admin"
    ORGANIZATION_OWNER = "organization_owner"
    BIDDER = "bidder"


class TenderStatus(str, Enum):
    DRAFT = "draft"
    OPEN = "open"
    CLOSED = "closed"
    AWARDED = "awarded"


class ApplicationStatus(str, Enum):
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    SHORTLISTED = "shortlisted"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
