"""
Pytest configuration and shared fixtures for dataembed tests.

This module provides common fixtures used across all test modules,
including sample invocation parameter maps and Flask app contexts.
"""

import pytest


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def sheet_url():
    """A supported Google Sheets source URL."""
    return 'https://docs.google.com/spreadsheets/d/1IX0g5P74QnHPR3GW1AMCdTk_-m954A-FKZRT2uOZY7k/edit'


@pytest.fixture
def platform_params():
    """Parameters the platform adds to every invocation."""
    return {
        '__ow_method': 'get',
        '__ow_headers': {'host': 'adobeioruntime.net'},
        'LOG_LEVEL': 'debug',
        'AWS_REGION': 'us-east-1',
        'api': 'v2',
    }


@pytest.fixture
def path_params(platform_params):
    """An invocation carrying its source in the unescaped path."""
    return {
        **platform_params,
        '__ow_path': '/https://docs.google.com/spreadsheets/d/abc/edit',
        'sheet': 'Sheet1',
        'hlx_limit': '10',
    }


# =============================================================================
# Flask App Fixtures
# =============================================================================

@pytest.fixture
def app():
    """Create a test Flask app."""
    from dataembed import create_app
    app = create_app('testing')
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
