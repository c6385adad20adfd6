"""
Pytest configuration and shared fixtures for the Careers Admin Console tests.
"""
import pytest
import os
from fastapi.testclient import TestClient
from unittest.mock import Mock, patch

# Import application components
import sys
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from backend.main import app
from backend import schemas
from backend.config.api import build_api_config
from backend.services.careers_api import CareersAPIClient, get_careers_api_client
from backend.services.session_store import SessionStore, get_session_store


TEST_BASE_URL = "https://careers.test"
COOKIE_NAME = "careers_admin_session"


# Environment Variable Mocks
@pytest.fixture(autouse=True)
def mock_environment_variables():
    """Mock environment variables for testing."""
    test_env = {
        "API_BASE_URL": TEST_BASE_URL,
        "LOG_LEVEL": "DEBUG",
        "ENVIRONMENT": "testing",
    }

    with patch.dict(os.environ, test_env):
        yield test_env


# Careers backend mock
@pytest.fixture
def api_client():
    """CareersAPIClient double; every remote call is a Mock."""
    client = Mock(spec=CareersAPIClient)
    client.config = build_api_config(TEST_BASE_URL)
    return client


@pytest.fixture
def session_store():
    return SessionStore(ttl_minutes=60)


@pytest.fixture(scope="function")
def test_client(api_client, session_store):
    """Test client wired to the mocked careers backend and a fresh session store."""
    app.dependency_overrides[get_careers_api_client] = lambda: api_client
    app.dependency_overrides[get_session_store] = lambda: session_store
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


# User Fixtures
@pytest.fixture
def admin_user():
    return schemas.AdminUser(
        firstName="Priya",
        lastName="Sharma",
        email="admin@trizenventures.com",
        role="admin",
    )


@pytest.fixture
def admin_session(session_store, admin_user):
    return session_store.create("test-token", admin_user)


@pytest.fixture
def auth_client(test_client, admin_session):
    """Test client carrying a valid admin session cookie."""
    test_client.cookies.set(COOKIE_NAME, admin_session.session_id)
    return test_client


# Application Test Data
@pytest.fixture
def technical_application_payload():
    """An AIML internship application as the careers backend returns it."""
    return {
        "_id": "665f1c2ab7e4a10012ab34cd",
        "fullName": "Arjun Mehta",
        "email": "arjun.mehta@example.com",
        "phone": "+91 98765 43210",
        "location": "Hyderabad",
        "linkedinProfile": "https://linkedin.com/in/arjunmehta",
        "motivation": "I enjoy building models.\nI want to ship them too.",
        "expectedStipend": "15000",
        "jobId": "TV-AIML-INT-2025-001",
        "status": "pending",
        "createdAt": "2025-03-05T09:30:00.000Z",
        "updatedAt": "2025-03-06T14:30:00.000Z",
        "educationStatus": "Final Year",
        "degreeDiscipline": "Computer Science",
        "portfolioUrl": "https://arjun.dev",
        "resumeLink": "https://drive.example.com/arjun-resume",
        "researchPapers": "Paper one\nPaper two",
        "internshipExperience": "Data intern at Acme",
        "preferredStartDate": "2025-04-01",
    }


@pytest.fixture
def social_media_application_payload():
    """A social media management application as the careers backend returns it."""
    return {
        "_id": "665f1c2ab7e4a10012ab99ef",
        "fullName": "Sneha Rao",
        "email": "sneha.rao@example.com",
        "phone": "+91 91234 56789",
        "location": "Bengaluru",
        "linkedinProfile": "https://linkedin.com/in/sneharao",
        "motivation": "Storytelling is my thing.",
        "expectedStipend": 8000,
        "jobId": "TV-MKT-SMM-2025-003",
        "status": "reviewed",
        "createdAt": "2025-03-07T10:00:00.000Z",
        "updatedAt": "2025-03-07T10:00:00.000Z",
        "currentQualification": "BBA",
        "collegeUniversity": "Christ University",
        "relevantCourses": "Digital Marketing\nBrand Strategy",
        "socialMediaPlatforms": ["Instagram", "LinkedIn"],
        "contentCreationSkills": ["Copywriting", "Canva"],
        "portfolioWorkSamples": "https://behance.net/sneha",
        "hoursPerWeek": 20,
        "workPreference": "Remote",
        "expectations": "Mentorship",
        "appliedBy": {"firstName": "Ravi", "lastName": "Kumar", "email": "ravi@trizenventures.com"},
    }


@pytest.fixture
def technical_application(technical_application_payload):
    return schemas.decode_application(technical_application_payload)


@pytest.fixture
def social_media_application(social_media_application_payload):
    return schemas.decode_application(social_media_application_payload)


@pytest.fixture
def sample_stats():
    return schemas.Stats.model_validate({
        "totalApplications": 128,
        "recentApplications": 17,
        "statusBreakdown": {
            "pending": 40,
            "reviewed": 30,
            "shortlisted": 25,
            "rejected": 21,
            "accepted": 12,
        },
    })


def mock_response(status_code=200, json_data=None, json_error=None):
    """Stand-in for requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response
