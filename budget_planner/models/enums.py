from enum import Enum

class TransactionType(str, Enum):
    income = "income"
    expense = "expense"
    savings = "savings"

class PaymentMethod(str, Enum):
    cash = "cash"
    credit = "credit"
    debit = "debit"
    bank_transfer = "bank_transfer"
    other = "other"
