# client/components.py
import streamlit as st
import pandas as pd

MEDIA_COLS = ("images", "videos", "blog2Images", "blog2Videos")

def show_records(rows, caption: str | None = None):
    """Render canonical records as a dataframe; media lists shown as counts."""
    if caption:
        st.caption(caption)
    if not rows:
        st.info("No records.")
        return
    flat = []
    for r in rows:
        row = {k: v for k, v in r.items() if k not in ("bodyData", "blogBodyHtml", "blog2BodyHtml")}
        for c in MEDIA_COLS:
            row[c] = len(r.get(c) or [])
        flat.append(row)
    st.dataframe(pd.DataFrame(flat))

def show_media(rec: dict, group: str = "blog"):
    images = rec.get("images" if group == "blog" else "blog2Images") or []
    videos = rec.get("videos" if group == "blog" else "blog2Videos") or []
    if images:
        st.image(images, width=160)
    for v in videos:
        st.video(v)

def show_json(obj, caption: str | None = None):
    if caption:
        st.caption(caption)
    st.json(obj)

def divider(label: str = ""):
    st.markdown(f"---\n**{label}**" if label else "---")
