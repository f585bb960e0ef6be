import os
import logging
from typing import Any

import streamlit as st

# --- OTel & Observability Imports ---
from opentelemetry import trace
from opentelemetry._logs import set_logger_provider
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource

# --- OTel Logging Imports ---
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.exporter.otlp.proto.grpc._log_exporter import OTLPLogExporter

# --- Prometheus Import ---
from prometheus_client import start_http_server

# --- Application Imports ---
from migkairl.config import GameConfig
from migkairl.content.bank import ContentBank, build_content_bank
from migkairl.core import PartyAction
from migkairl.presentation.renderer import StreamlitRenderer
from migkairl.presentation.state_provider import StreamlitStateProvider
from migkairl.presentation.viewmodel import PartyViewModel
from migkairl.shared.telemetry import GAME_REGISTRY


# --- 1. Configure Observability ---
def configure_observability() -> None:
    """
    Sends traces and logs over OTLP when the OTEL env vars are present,
    and exposes Prometheus metrics in the background.
    """
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    headers = os.getenv("OTEL_EXPORTER_OTLP_HEADERS")

    if not endpoint or not headers:
        logging.warning("OTEL env vars not set. Telemetry stays local.")
        return

    resource = Resource.create({"service.name": GameConfig.SERVICE_NAME})

    # --- A. Tracing ---
    trace_provider = TracerProvider(resource=resource)
    trace_provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, headers=headers))
    )
    trace.set_tracer_provider(trace_provider)

    # --- B. Logging ---
    logger_provider = LoggerProvider(resource=resource)
    logger_provider.add_log_record_processor(
        BatchLogRecordProcessor(OTLPLogExporter(endpoint=endpoint, headers=headers))
    )
    set_logger_provider(logger_provider)
    handler = LoggingHandler(level=logging.INFO, logger_provider=logger_provider)
    logging.getLogger().addHandler(handler)

    # --- C. Metrics ---
    try:
        start_http_server(GameConfig.METRICS_PORT, registry=GAME_REGISTRY)
        logging.info(f"Prometheus metrics on port {GameConfig.METRICS_PORT}")
    except OSError:
        logging.warning(
            f"Port {GameConfig.METRICS_PORT} already in use (likely a Streamlit reload). Skipping."
        )


# --- 2. Bootstrap Application ---
if "observability_configured" not in st.session_state:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    configure_observability()
    st.session_state.observability_configured = True


# --- 3. Composition Root ---
@st.cache_resource
def get_bank() -> ContentBank:
    # Built once per process; an empty bank aborts here, before any draw
    return build_content_bank()


def main() -> None:
    st.set_page_config(page_title=GameConfig.PAGE_TITLE, layout="centered")

    vm = PartyViewModel(get_bank(), StreamlitStateProvider())
    renderer = StreamlitRenderer()

    def on_action(action: PartyAction, payload: Any) -> None:
        vm.handle_action(action, payload)
        st.rerun()

    renderer.render(vm.get_view(), on_action, vm.update_entry)


if __name__ == "__main__":
    main()
