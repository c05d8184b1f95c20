# client/pages/1_✏️_Records.py
import json
import streamlit as st
import api as API
from components import show_json

st.title("✏️ Records")

table = st.selectbox("Table", ["clients", "clients_blog2"], key="rec_table")
prefix = "blog" if table == "clients" else "blog2"
media_keys = ("images", "videos") if table == "clients" else ("blog2_images", "blog2_videos")

def _files(uploaded):
    return [(f.name, f.getvalue(), f.type or "application/octet-stream") for f in uploaded or []]

# ------------------------
# Create
# ------------------------
st.subheader("Create")
with st.form("create_form", clear_on_submit=False):
    c1, c2 = st.columns(2)
    with c1:
        client_name = st.text_input("Client name *")
        title = st.text_input(f"{prefix} title *")
        slug = st.text_input(f"{prefix} slug (optional, derived from title)")
        cta = st.text_input("CTA text", value="Read full Case Study") if table == "clients" else None
    with c2:
        logo = st.file_uploader("Logo *", type=["png", "jpg", "jpeg", "svg", "webp"])
        images = st.file_uploader("Images", accept_multiple_files=True, type=["png", "jpg", "jpeg", "webp", "gif"])
        videos = st.file_uploader("Videos", accept_multiple_files=True, type=["mp4", "webm", "mov"])
    body = st.text_area(f"{prefix} body (HTML)", height=200)
    submitted = st.form_submit_button("➕ Create")

if submitted:
    if not client_name or not title or logo is None:
        st.error("Client name, title and logo are required.")
    else:
        try:
            # uploads must finish before the record is saved
            with st.spinner("Uploading media…"):
                logo_url = API.upload(_files([logo]))[0]
                image_urls = API.upload(_files(images))
                video_urls = API.upload(_files(videos))
            payload = {
                "client_name": client_name,
                "logo_url": logo_url,
                f"{prefix}_title": title,
                f"{prefix}_body_html": body,
                media_keys[0]: image_urls,
                media_keys[1]: video_urls,
            }
            if slug:
                payload[f"{prefix}_slug"] = slug
            if cta:
                payload["cta_text"] = cta
            row = API.create(table, payload)
            st.success(f"Created {row['id']}")
            show_json(row)
        except Exception as e:
            st.error(API.error_text(e))

st.divider()

# ------------------------
# Edit / delete
# ------------------------
st.subheader("Edit or delete")
rid = st.text_input("Record id", key="edit_id")
if rid and st.button("Load", key="btn_load"):
    try:
        st.session_state.loaded = API.record(table, rid)
    except Exception as e:
        st.session_state.loaded = None
        st.error(API.error_text(e))

loaded = st.session_state.get("loaded")
if loaded and loaded.get("id") == rid:
    show_json(loaded, caption="Current record")
    patch_text = st.text_area(
        "Partial update (JSON; only keys you include are changed, [] clears a media list)",
        value='{"videos": []}' if table == "clients" else '{"blog2_videos": []}',
        key="patch_text",
    )
    more = st.file_uploader("Append images", accept_multiple_files=True, key="append_images")
    cA, cB = st.columns(2)
    with cA:
        if st.button("💾 Save", key="btn_patch"):
            try:
                patch = json.loads(patch_text or "{}")
                if more:
                    key = media_keys[0]
                    current = loaded["images"] if table == "clients" else loaded["blog2Images"]
                    patch[key] = list(patch.get(key, current)) + API.upload(_files(more))
                st.session_state.loaded = API.update(table, rid, patch)
                st.success("Saved.")
            except json.JSONDecodeError as e:
                st.error(f"Invalid JSON: {e}")
            except Exception as e:
                st.error(API.error_text(e))
    with cB:
        if st.button("🗑️ Delete", key="btn_delete"):
            try:
                API.delete(table, rid)
                st.session_state.loaded = None
                st.success(f"Deleted {rid}. Uploaded files stay in the bucket.")
            except Exception as e:
                st.error(API.error_text(e))
