"""crudcontract test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows (CLI, pytest runs) tested at the boundary.
- contract/     : The shared CRUD suites run against sample controllers.
- helpers/      : Sample models, controllers and templates (no tests here).

General guidance
- Keep unit fast and deterministic; prefer fakes over mocks at boundaries.
- Functional asserts user-observable results, not internals.
- Contract parametrizes resources to show one suite serves every controller.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
