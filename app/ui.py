import streamlit as st
from datetime import timedelta

from flight_quality.config import load_settings
from flight_quality.kpis import findings_by_aircraft, findings_by_section
from flight_quality.load import FlightDataError, flights_to_frame, load_flights
from flight_quality.report import DEFAULT_MIN_TURNAROUND, build_report
from flight_quality.visualize import build_findings_by_aircraft_figure, build_findings_by_section_figure

# --- Page Configuration ---
st.set_page_config(
    page_title="Flight Data Quality",
    page_icon="✈️",
    layout="wide",
    initial_sidebar_state="expanded",
)

# --- Helper Functions ---

@st.cache_data
def load_data(file_path):
    """Loads flight records from a CSV file with caching."""
    return load_flights(file_path)


# --- Load Data ---
settings = load_settings()

st.sidebar.title("Flight File")
uploaded = st.sidebar.file_uploader("Upload a flight CSV", type=["csv"])
default_minutes = int(DEFAULT_MIN_TURNAROUND.total_seconds() // 60)
turnaround_mins = st.sidebar.number_input("Minimum turnaround (minutes)", min_value=0, value=default_minutes, step=15)

try:
    if uploaded is not None:
        flights = load_flights(uploaded)
        source_name = uploaded.name
    else:
        flights = load_data(str(settings.flights_csv_path))
        source_name = str(settings.flights_csv_path)
except (FileNotFoundError, FlightDataError) as e:
    st.error(f"Could not load flight data: {e}")
    st.stop()

report = build_report(flights, timedelta(minutes=turnaround_mins))

# --- Sidebar Navigation ---
st.sidebar.title("Navigation")
page = st.sidebar.radio("Go to", ["Inconsistency Report", "Findings Overview", "Flight Records"])

# --- Main App ---

if page == "Inconsistency Report":
    st.title("✈️ Flight Data Inconsistency Report")
    st.markdown(f"Checking **{len(flights)}** flight records from `{source_name}`.")

    if report.is_clean:
        st.success(report.lines()[0])
    else:
        st.metric(label="Total Findings", value=len(report.findings))
        for section in report.sections:
            with st.expander(f"{section.title} ({len(section.findings)})", expanded=True):
                for finding in section.findings:
                    st.write(finding.message)


elif page == "Findings Overview":
    st.title("📊 Findings Overview")

    if report.is_clean:
        st.info("No inconsistencies found, nothing to chart.")
    else:
        col1, col2 = st.columns(2)
        section_df = findings_by_section(report)
        aircraft_df = findings_by_aircraft(report.findings)
        with col1:
            st.subheader("Findings by Check")
            st.dataframe(section_df)
        with col2:
            st.subheader("Aircraft with the Most Findings")
            st.dataframe(aircraft_df)

        st.plotly_chart(build_findings_by_section_figure(section_df), use_container_width=True)
        st.plotly_chart(build_findings_by_aircraft_figure(aircraft_df), use_container_width=True)


elif page == "Flight Records":
    st.title("🗂️ Flight Records")
    flight_df = flights_to_frame(flights)

    registrations = sorted(flight_df['aircraft_registration'].dropna().unique())
    selected = st.multiselect("Aircraft", options=registrations)
    if selected:
        flight_df = flight_df[flight_df['aircraft_registration'].isin(selected)]

    st.dataframe(flight_df.sort_values(by=['aircraft_registration', 'departure_datetime'], na_position='last'))
    st.caption(f"{len(flight_df)} of {len(flights)} records shown.")
