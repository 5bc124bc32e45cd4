"""Shared fixtures."""

import pytest

from snfix.analysis.dictionary import ApiDictionary, default_dictionary


@pytest.fixture
def servicenow_dictionary():
    """The bundled ServiceNow dictionary."""
    return default_dictionary()


@pytest.fixture
def small_dictionary():
    """A minimal dictionary with one class and one global object."""
    return ApiDictionary.from_mapping(
        class_names=["GlideRecord", "GlideAjax"],
        context_methods={
            "GlideRecord": ["getValue", "setValue", "update", "query"],
            "gs": ["info", "getUser", "getSession"],
        },
        global_objects=["gs"],
    )
