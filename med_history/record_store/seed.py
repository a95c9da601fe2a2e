"""MedHistory — Стартовий список захворювань"""

DEFAULT_SEED = [
    {"id": 1, "name": "Diabetes", "status": "Yes", "since": "2018", "notes": "Type 1"},
    {"id": 2, "name": "Hypertension", "status": "Yes"},
    {"id": 3, "name": "Thyroid Dysfunction", "status": "No"},
    {"id": 4, "name": "Migraine", "status": "Yes"},
    {"id": 5, "name": "Cardiac", "status": "No"},
    {"id": 6, "name": "Epilepsy", "status": "No"},
    {"id": 7, "name": "Asthma", "status": "No"},
    {"id": 8, "name": "TB", "status": "Yes"},
    {"id": 9, "name": "Blood Transfusion", "status": "Yes"},
    {"id": 10, "name": "Surgery", "status": "No"},
    {"id": 11, "name": "Thromboembolism", "status": "No"},
]
