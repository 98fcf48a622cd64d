"""UI subpackage - Streamlit page."""
