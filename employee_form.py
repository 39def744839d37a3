#!/usr/bin/env python3
"""
Streamlit Employee Manager

Form + list UI over EmployeeFormController.
Run with: streamlit run employee_form.py
"""

import logging

import streamlit as st

from client.controller import EmployeeFormController
from client.photo import PhotoFile
from models.employee import DEPARTMENTS
from utils.image_utils import decode_data_url, describe_photo

logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title="Employee Manager", page_icon="👥", layout="wide")

STATUS_REFRESH_SECONDS = 1


def get_controller() -> EmployeeFormController:
    if "controller" not in st.session_state:
        controller = EmployeeFormController()
        controller.refresh()
        st.session_state.controller = controller
        st.session_state.generation = 0
    return st.session_state.controller


def new_generation():
    """Widgets are keyed per generation so a reset or edit repopulates them"""
    st.session_state.generation += 1


def key(name: str) -> str:
    return f"{name}_{st.session_state.generation}"


def on_field_change(name: str):
    get_controller().change_field(name, st.session_state[key(name)])


def on_photo_change():
    uploaded = st.session_state[key("photo")]
    if uploaded is None:
        return
    photo = PhotoFile.from_bytes(uploaded.name, uploaded.getvalue(), uploaded.type)
    future = get_controller().select_photo(photo)
    if future is not None:
        future.result()


def on_submit():
    if get_controller().submit():
        new_generation()


def on_reset():
    get_controller().reset()
    new_generation()


def on_edit(employee):
    get_controller().begin_edit(employee)
    new_generation()


def show_photo(data_url: str, width: int = 160):
    try:
        _, image_bytes = decode_data_url(data_url)
    except ValueError:
        st.caption("unreadable image")
        return
    st.image(image_bytes, width=width, caption=describe_photo(data_url))


def render_form(controller: EmployeeFormController):
    state = controller.state
    draft, errors = state.draft, state.errors

    st.subheader("Edit Employee" if state.is_editing else "Create Employee")

    text_fields = [
        ("name", "Employee Name *"),
        ("number", "Employee Number *"),
        ("email", "Employee Email *"),
    ]
    for name, label in text_fields:
        st.text_input(label, value=draft[name], key=key(name),
                      on_change=on_field_change, args=(name,))
        if name in errors:
            st.error(errors[name])
        if name == "name":
            st.selectbox("Department *", DEPARTMENTS, index=DEPARTMENTS.index(draft["dept"]),
                         key=key("dept"), on_change=on_field_change, args=("dept",))
            st.checkbox("Employee Active", value=draft["active"], key=key("active"),
                        on_change=on_field_change, args=("active",))

    st.text_area("Employee Address *", value=draft["address"], key=key("address"),
                 on_change=on_field_change, args=("address",))
    if "address" in errors:
        st.error(errors["address"])

    st.file_uploader("Employee Photo *", type=["jpg", "jpeg", "png"], key=key("photo"),
                     on_change=on_photo_change)
    if draft["photo"]:
        show_photo(draft["photo"])
    if "photo" in errors:
        st.error(errors["photo"])

    col1, col2 = st.columns(2)
    col1.button("Update" if state.is_editing else "Create", type="primary", on_click=on_submit)
    col2.button("Clear", on_click=on_reset)


def render_list(controller: EmployeeFormController):
    st.subheader("Employee List")
    employees = controller.state.employees
    if not employees:
        st.info("No employees yet. Create one!")
        return

    for emp in employees:
        info, actions = st.columns([3, 2])
        info.markdown(f"**{emp['name']}**  \n{emp['email']} • {emp['dept']}  \n"
                      f"Status: {'Active' if emp['active'] else 'Inactive'}")
        edit, delete, view = actions.columns(3)
        edit.button("Edit", key=f"edit_{emp['id']}", on_click=on_edit, args=(emp,))
        delete.button("Delete", key=f"delete_{emp['id']}",
                      on_click=controller.request_delete, args=(emp['id'],))
        view.button("View", key=f"view_{emp['id']}", on_click=controller.view, args=(emp,))


def render_dialogs(controller: EmployeeFormController):
    state = controller.state

    if state.pending_delete_id is not None:
        st.warning("Are you sure you want to delete this employee? This action cannot be undone.")
        cancel, confirm = st.columns(2)
        cancel.button("Cancel", on_click=controller.cancel_delete)
        confirm.button("Delete", type="primary", on_click=controller.confirm_delete)

    emp = state.viewing
    if emp is not None:
        with st.container(border=True):
            st.markdown("#### Employee Details")
            st.markdown(
                f"**Name:** {emp['name']}  \n"
                f"**Dept:** {emp['dept']}  \n"
                f"**Status:** {'Active' if emp['active'] else 'Inactive'}  \n"
                f"**Number:** {emp['number'] or '—'}  \n"
                f"**Email:** {emp['email']}  \n"
                f"**Address:** {emp['address'] or '—'}"
            )
            if emp.get("photo"):
                show_photo(emp["photo"], width=200)
            st.button("Close", on_click=controller.close_view)


@st.fragment(run_every=STATUS_REFRESH_SECONDS)
def render_status():
    """Repaints on its own so a status cleared by its timer leaves the screen"""
    status = get_controller().state.status
    if status is not None:
        (st.success if status.severity == "success" else st.error)(status.text)


def main():
    st.title("👥 Employee Manager")
    controller = get_controller()

    render_status()

    form_col, list_col = st.columns(2)
    with form_col:
        render_form(controller)
    with list_col:
        render_list(controller)
        render_dialogs(controller)


main()
