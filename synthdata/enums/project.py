from enum import Enum


class Industry(str, Enum):
    fintech = "fintech"
    banking = "banking"
    insurance = "insurance"
    telco = "telco"
    healthcare = "healthcare"
