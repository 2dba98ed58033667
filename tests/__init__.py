"""
partial_templates test suite
============================

Test Modules
------------
- test_naming.py: Tests for script tag id derivation
- test_models.py: Tests for Pydantic configuration models
- test_lister.py: Tests for the cached directory listing
- test_engine.py: Tests for view lookup and rendering
- test_helper.py: Tests for script tag wrapping
- test_cli.py: Tests for the command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_helper.py

    # Run specific test class
    pytest tests/test_helper.py::TestRenderAllTemplates
"""
