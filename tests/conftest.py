"""Shared fixtures for the openenum test suite."""

import logging

import pytest

from openenum.codegen.core.model import load_enum_definitions


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Remove handlers installed by setup_logging during a test."""
    yield
    package_logger = logging.getLogger("openenum")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def status_document():
    return {
        "enums": {
            "Status": {
                "documentation": "Lifecycle state of a resource.",
                "members": [
                    "pending",
                    {"value": "active", "documentation": "The resource is live."},
                    {"value": "retired", "deprecated": True},
                ],
            }
        }
    }


@pytest.fixture
def two_enum_document():
    return {
        "enums": {
            "Status": ["active", "inactive"],
            "Color": ["red", "green", "blue"],
        }
    }


@pytest.fixture
def status_enums(status_document):
    return load_enum_definitions(status_document)


def exec_generated(code):
    """Execute generated Python source and return its namespace."""
    namespace = {"__name__": "generated_enums"}
    exec(compile(code, "<generated>", "exec"), namespace)
    return namespace


@pytest.fixture
def load_generated():
    return exec_generated
