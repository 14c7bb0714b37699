"""WORDCAP test suite.

Folder taxonomy
- unit/ : Isolated, fast checks of a single module/class/function.
- e2e/  : The `wordcap` command invoked through Click's CliRunner.

Property-based tests live with the layer they exercise and use
@pytest.mark.property.
"""
