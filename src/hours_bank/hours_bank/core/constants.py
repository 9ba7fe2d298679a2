"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

WEEK_WINDOW_DAYS = 7
MONTH_WINDOW_DAYS = 30
DEFAULT_RECENT_ENTRIES = 20
DEFAULT_REFERENCE_TIMEZONE = "America/Sao_Paulo"

# Daily hours above this count as overtime when an entry is stored.
DAILY_OVERTIME_THRESHOLD = 8.0

# Sunday first, matching date.isoweekday() % 7.
WEEKDAY_LABELS = ("Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sáb")

DEFAULT_LEAVE_REQUEST_LIMIT = 200

LEAVE_STATUS_LABELS = {
    "pending": "Pendente",
    "approved": "Aprovado",
    "rejected": "Rejeitado",
}

LEAVE_TYPE_LABELS = {
    "vacation": "Férias",
    "sick": "Atestado Médico",
    "personal": "Folga Pessoal",
    "emergency": "Emergência",
}
