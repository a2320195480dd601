import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

import streamlit as st

from command_center.utils.formatting import describe_disk, describe_memory, format_duration
from dashboard.utils.api_client import get_system, get_uptime

st.title("⚙️ Host Status")

system = get_system()
uptime = get_uptime()
if "error" in system:
    st.error(system["error"])
    st.stop()

cpu = system["cpu"]
c1, c2, c3 = st.columns(3)
c1.metric("Load 1m", cpu["load1"], help=f"{cpu['cores']} logical cores")
c2.metric("Load 5m", cpu["load5"])
c3.metric("Load 15m", cpu["load15"])

st.write(f"Memory: {describe_memory(system['memory'])} ({system['memory']['usedPercentage']}%)")
st.write(f"Disk: {describe_disk(system['disk'])}")
if "error" not in uptime:
    st.write(f"Host up {format_duration(uptime['systemSeconds'])}, service up {format_duration(uptime['processSeconds'])}")

with st.expander("Raw payload"):
    st.json(system)
