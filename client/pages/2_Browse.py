# client/pages/2_📚_Browse.py
import streamlit as st
import api as API
from components import show_records, show_media, show_json

st.title("📚 Browse")

tab1, tab2 = st.tabs(["Records", "Blog by slug"])

with tab1:
    table = st.selectbox("Table", ["clients", "clients_blog2"], key="browse_table")
    if st.button("Fetch records", key="btn_fetch_records"):
        try:
            rows, unavailable = API.records(table)
            if unavailable:
                st.warning("Datastore unavailable: the empty list below may not be the real contents.")
            show_records(rows, caption=f"{len(rows)} record(s) in {table}")
        except Exception as e:
            st.error(API.error_text(e))

with tab2:
    group = st.selectbox("Section", ["blog", "blog2"], key="slug_group")
    slug = st.text_input("Slug", placeholder="hello-world")
    if st.button("Fetch post", key="btn_fetch_post") and slug:
        try:
            rec = API.blog(slug, group)
            title = rec["blogTitle"] if group == "blog" else rec["blog2Title"]
            st.subheader(title or "Untitled")
            feature = rec["blogFeatureImage"] if group == "blog" else rec["blog2FeatureImage"]
            if feature:
                st.image(feature, width=480)
            show_media(rec, group)
            body = rec["blogBodyHtml"] if group == "blog" else rec["blog2BodyHtml"]
            st.markdown(body or "", unsafe_allow_html=True)
            with st.expander("Raw record"):
                show_json(rec)
        except Exception as e:
            st.error(API.error_text(e))
