from pathlib import Path


def test_compile():
    # Base modules must import with only the required dependencies installed
    import planeprojection
    import planeprojection.conversion
    import planeprojection.projection

    version_file = Path(__file__).resolve().parents[1] / 'VERSION'
    assert planeprojection.__version__ == version_file.read_text(encoding='utf-8').strip()
