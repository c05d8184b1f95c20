# client/streamlit_app.py
import os
import requests
import streamlit as st

st.set_page_config(page_title="Agency Admin", layout="wide")
st.title("🗂️ Agency Admin")

st.markdown("""
This is the home page.

Use the **sidebar Pages** to open:
- **✏️ Records** — Create a client/blog record (logo and media are uploaded first, then the record is saved), edit fields with a partial update, or delete a record.
- **📚 Browse** — List `clients` / `clients_blog2`, and look up a public blog post by slug.
""")

with st.sidebar:
    st.header("Settings")
    api_url = os.getenv("API_BASE_URL", "http://localhost:8000")
    st.text_input("API Base URL (from env)", value=api_url, disabled=True)
    if st.button("Health check"):
        try:
            r = requests.get(f"{api_url}/healthz", timeout=5)
            st.success(r.json())
        except requests.RequestException as e:
            st.error(f"Health check failed: {e}")

st.info("Tip: set `API_BASE_URL` in `client/.env` or export it before running `streamlit run client/streamlit_app.py`.")
