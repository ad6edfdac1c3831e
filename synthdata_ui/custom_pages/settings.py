import streamlit as st

from synthdata_ui.context import SessionContext
from synthdata_ui.navigation import DashboardState


def main(ctx: SessionContext, state: DashboardState):
    st.header("Settings")

    st.subheader("Account Information")
    st.write(f"Email: {ctx.user.email}")
    st.write(f"User ID: {ctx.user.id}")

    st.subheader("Compliance")
    st.success("**Kenya Data Protection Act Compliant**\n\nAll generated data meets regulatory requirements")

    st.subheader("Privacy Settings")
    for title, caption in [
        ("Differential Privacy", "Mathematical privacy guarantees"),
        ("Auto Compliance Reports", "Generate reports automatically"),
    ]:
        left, right = st.columns([4, 1])
        left.markdown(f"**{title}**")
        left.caption(caption)
        right.markdown("✅ Enabled")
