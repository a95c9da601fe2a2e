"""
MedHistory — Web UI Module

Streamlit форма анамнезу поверх MedHistory API.

Запуск:
    streamlit run med_history/web_ui/app.py

    або:

    python scripts/run_web.py

Вимоги:
    - Streamlit >= 1.28.0
    - Requests
    - API сервер (python scripts/run_api.py)
"""

__version__ = "1.0.0"
