"""Contract tests.

Purpose
- Run the shared CRUD suites against the sample controllers, once per
  resource, to keep the suites and the controllers they describe in agreement.

Guidelines
- Parametrize resources via the `crud_names` fixture.
- Assert only the public contract (requests/responses/collaborator calls).
"""
