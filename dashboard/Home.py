# -*- coding: utf-8 -*-
"""
Dev Command Center · operator console
- Polls /api/dashboard from the FastAPI service
- Each widget degrades on its own when its section carries an `error`
"""
from __future__ import annotations

import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import streamlit as st

from command_center.utils.formatting import (
    cpu_load_percent,
    describe_cpu,
    describe_disk,
    describe_memory,
    describe_repo,
    describe_uptime,
    describe_weather,
)
from dashboard.utils.api_client import API_BASE, get_dashboard

st.set_page_config(page_title="Dev Command Center", layout="wide")
st.title("🛰️ Dev Command Center")

user = st.sidebar.text_input("GitHub user (optional)", value="")
st.sidebar.caption(f"API: {API_BASE}")
if st.sidebar.button("🔄 Refresh"):
    st.rerun()

data = get_dashboard(user.strip() or None)
if "error" in data:
    st.error(data["error"])
    st.caption(data.get("details", ""))
    st.stop()

system = data["system"]
sys_uptime, proc_uptime = describe_uptime(data.get("uptime"))
st.caption(f"{system['platform']} {system['release']} · {sys_uptime}")

c1, c2, c3 = st.columns(3)
with c1:
    st.subheader("System")
    st.write(f"CPU load: {describe_cpu(system['cpu'])}")
    st.progress(cpu_load_percent(system["cpu"]) / 100)
    st.write(f"Memory: {describe_memory(system['memory'])}")
    st.progress(min(1.0, system["memory"]["usedPercentage"] / 100))
    disk = system["disk"]
    st.write(f"Disk: {describe_disk(disk)}")
    if "error" not in disk:
        st.progress(min(1.0, disk["usedPercentage"] / 100))

with c2:
    st.subheader("Recent repositories")
    github = data["github"]
    if isinstance(github, dict) and "error" in github:
        st.warning(github["error"])
    elif not github:
        st.info("No repositories found. Check your GitHub username.")
    else:
        for repo in github:
            st.markdown(f"**[{repo['name']}]({repo['url']})**")
            st.caption(repo.get("description") or "No description provided.")
            st.caption(describe_repo(repo))

with c3:
    st.subheader("Weather")
    for line in describe_weather(data["weather"]):
        st.write(line)
    st.subheader("Uptime")
    st.write(sys_uptime)
    st.write(proc_uptime)

st.divider()
st.markdown(f"> {data['motivation']['quote']}")
