"""Weather Lookup Streamlit UI"""
