"""Shared BDD fixtures and step definitions for user registration."""

from pytest_bdd import given, parsers, then


@given(parsers.cfparse('the user id "{user_id}" is already registered'))
def user_already_registered(identity_service, user_id):
    identity_service.users.add(user_id)


@given("the authentication service is unreachable")
def auth_service_unreachable(identity_service):
    identity_service.configure(unreachable=True)


@then(parsers.cfparse("the gateway responds with status {status:d}"))
def gateway_status(response, status):
    assert response.status_code == status


@then(parsers.cfparse('the response body is "{body}"'))
def response_body(response, body):
    assert response.text == body


@then("the authentication service was not called")
def auth_service_not_called(identity_service):
    assert identity_service.calls == []
