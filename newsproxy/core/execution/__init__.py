"""Execution module for the news proxy.

Provides upstream error classification and the retry controller.
"""

from newsproxy.core.execution.error_classifier import ErrorClassifier
from newsproxy.core.execution.retry_controller import RetryController, UpstreamClient

__all__ = ["ErrorClassifier", "RetryController", "UpstreamClient"]
