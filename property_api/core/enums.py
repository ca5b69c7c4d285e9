from enum import Enum


class RoomStatus(str, Enum):
    vacant = "vacant"
    occupied = "occupied"
    maintenance = "maintenance"


class TenantStatus(str, Enum):
    active = "active"
    inactive = "inactive"


class ContractStatus(str, Enum):
    active = "active"
    terminated = "terminated"
    expired = "expired"


class TransactionType(str, Enum):
    income = "income"
    expense = "expense"
    rent = "rent"
    deposit = "deposit"
    refund = "refund"


# Money flowing in vs out, used by the finance summary
INCOME_TRANSACTION_TYPES = (TransactionType.income, TransactionType.rent, TransactionType.deposit)
EXPENSE_TRANSACTION_TYPES = (TransactionType.expense, TransactionType.refund)


class MaintenanceType(str, Enum):
    preventive = "preventive"
    corrective = "corrective"
    predictive = "predictive"


class MaintenancePriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class MaintenanceStatus(str, Enum):
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"


class UserRole(str, Enum):
    admin = "admin"
    manager = "manager"
    staff = "staff"


class UserStatus(str, Enum):
    active = "active"
    inactive = "inactive"
