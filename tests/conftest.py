# tests/conftest.py
"""
Shared fixtures for the Civic Reporter tests
"""
import pytest

from app import create_app


@pytest.fixture
def upload_folder(tmp_path):
    folder = tmp_path / 'uploads'
    folder.mkdir()
    return folder


@pytest.fixture
def app(upload_folder):
    """Fresh application with an empty in-memory store"""
    return create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'UPLOAD_FOLDER': str(upload_folder),
        'SECRET_KEY': 'test-secret-key-for-testing',
    })


@pytest.fixture
def client(app):
    """HTTP test client"""
    with app.test_client() as client:
        yield client


@pytest.fixture
def store(app):
    """ReportStore used inside an application context"""
    with app.app_context():
        yield app.extensions['report_store']


def report_fields(**overrides):
    fields = {
        'title': 'Broken streetlight',
        'category': 'Electricity',
        'priority': 'High',
        'location': 'Oak Avenue',
        'description': 'The streetlight has been off for a week',
    }
    fields.update(overrides)
    return fields
