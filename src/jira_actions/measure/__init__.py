"""Measurement module: observations, sinks and the action meter."""

from jira_actions.measure.meter import ActionMeter
from jira_actions.measure.observation import Observation
from jira_actions.measure.sink import (
    InMemoryObservationSink,
    JsonLinesObservationSink,
    LoggingObservationSink,
    ObservationSink,
)

__all__ = [
    "ActionMeter",
    "Observation",
    "ObservationSink",
    "InMemoryObservationSink",
    "LoggingObservationSink",
    "JsonLinesObservationSink",
]
