import pytest

from hanseg.hmm import emission_from_mapping
from hanseg.lexicon import Lexicon
from hanseg.schema import Token


def pytest_addoption(parser):
    """Add custom command line option for enabling stress tests."""
    parser.addoption(
        "--stress",
        action="store_true",
        default=False,
        help="Enable long-running concurrency stress tests (skipped by default for CI/CD)"
    )


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "stress: mark test as requiring --stress flag to run"
    )


def pytest_collection_modifyitems(config, items):
    """Skip stress tests unless --stress flag is provided."""
    if config.getoption("--stress"):
        return

    skip_stress = pytest.mark.skip(reason="need --stress option to run")
    for item in items:
        if "stress" in item.keywords:
            item.add_marker(skip_stress)


@pytest.fixture
def capital_emission():
    """Emission table that tags 北京大学 as B E B E."""
    return emission_from_mapping({
        "B": {"北": -1.0, "大": -1.0, "清": -1.0},
        "E": {"京": -1.0, "学": -1.0, "华": -1.0},
        "M": {},
        "S": {"的": -0.5, "我": -0.5}
    })


@pytest.fixture
def sample_lexicon():
    lexicon = Lexicon()
    lexicon.load_tokens([
        Token(text="北京", frequency=0.03, pos="ns"),
        Token(text="大学", frequency=0.02, pos="n"),
    ])
    return lexicon
