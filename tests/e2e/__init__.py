"""
Kanban E2E Test Suite

End-to-end browser tests using Playwright against a running kanban
application (E2E_BASE_URL, default http://localhost:3000).

Structure:
    conftest.py               - Fixtures, hooks and browser settings
    test_smoke_*.py           - Critical path checks
    test_regression_*.py      - Edge cases and boundary values
    test_auth_*.py            - Login and session handling
    test_a11y_*.py            - axe-core accessibility audits
    test_visual_*.py          - Screenshot checkpoints against baselines

Running Tests:
    # Install dependencies
    pip install -e ".[test]"
    playwright install

    # Run all tests
    pytest tests/e2e/

    # Run with visible browser
    pytest tests/e2e/ --headed

    # Run specific browser
    pytest tests/e2e/ --browser firefox

    # Run one suite only
    pytest tests/e2e/ -m smoke
    pytest tests/e2e/ -m "a11y and not slow"

    # Refresh visual baselines
    E2E_VISUAL_UPDATE=true pytest tests/e2e/ -m visual
"""
