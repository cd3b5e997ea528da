import pytest

from s3walker import clients


@pytest.fixture(autouse=True)
def clear_cache():
    """Clear cached sessions and clients between tests."""
    clients.get_session.cache_clear()
    clients.get_s3_client.cache_clear()
    clients.get_cloudwatch_client.cache_clear()


def test_clients_use_region_and_profile(mocker):
    mock_session = mocker.patch("s3walker.clients.boto3.session.Session")

    clients.get_s3_client("eu-west-1", "audit")
    clients.get_cloudwatch_client("eu-west-1", "audit")

    mock_session.assert_called_once_with(profile_name="audit")
    session = mock_session.return_value
    session.client.assert_any_call("s3", region_name="eu-west-1")
    session.client.assert_any_call("cloudwatch", region_name="eu-west-1")


def test_clients_are_cached(mocker):
    mocker.patch("s3walker.clients.boto3.session.Session")

    assert clients.get_s3_client() is clients.get_s3_client()
