import pytest

from suitool.spec import (
    BinaryName,
    BinaryVersion,
    CommandMetadata,
    SpecError,
    format_table,
    parse_component_with_version,
    parse_version_spec,
    print_table,
)


def test_parse_component_with_version():
    assert parse_component_with_version("sui") == CommandMetadata(
        name=BinaryName.SUI, network="testnet", version=None
    )
    assert parse_component_with_version("sui@testnet-v1.39.3") == CommandMetadata(
        name=BinaryName.SUI, network="testnet", version="v1.39.3"
    )
    assert parse_component_with_version("walrus") == CommandMetadata(
        name=BinaryName.WALRUS, network="testnet", version=None
    )
    assert parse_component_with_version("mvr") == CommandMetadata(
        name=BinaryName.MVR, network="testnet", version=None
    )
    with pytest.raises(SpecError, match="Invalid binary name: random"):
        parse_component_with_version("random")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("sui", "sui"),
        ("mvr", "mvr"),
        ("walrus", "walrus"),
        ("site-builder", "site-builder"),
        ("move-analyzer", "move-analyzer"),
    ],
)
def test_component_display(text, expected):
    assert str(BinaryName.from_str(text)) == expected
    assert str(parse_component_with_version(text).name) == expected


def test_empty_version_is_rejected():
    with pytest.raises(SpecError) as info:
        parse_component_with_version("sui@")
    assert (
        "Version cannot be empty. Use 'binary' or 'binary@version' (e.g., sui@v1.60.0)"
        in str(info.value)
    )


def test_invalid_version_format():
    with pytest.raises(SpecError) as info:
        parse_component_with_version("sui@nonexistent")
    assert (
        "Invalid version format: 'nonexistent'. Expected a version like 'v1.60.0' "
        "or '1.60.0', or when applicable, 'testnet', 'devnet', 'mainnet'."
    ) in str(info.value)


def test_invalid_name_with_version():
    with pytest.raises(SpecError, match="Invalid binary name: nope"):
        parse_component_with_version("nope@1.2.3")


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("sui@testnet-1.39.3", CommandMetadata(BinaryName.SUI, "testnet", "1.39.3")),
        ("walrus@testnet-v1.18.2", CommandMetadata(BinaryName.WALRUS, "testnet", "v1.18.2")),
        ("mvr@0.0.4", CommandMetadata(BinaryName.MVR, "testnet", "0.0.4")),
        ("sui@testnet", CommandMetadata(BinaryName.SUI, "testnet", None)),
        ("sui==mainnet", CommandMetadata(BinaryName.SUI, "mainnet", None)),
        ("sui=v1.60.0", CommandMetadata(BinaryName.SUI, "testnet", "v1.60.0")),
        ("sui devnet-1.2.0", CommandMetadata(BinaryName.SUI, "devnet", "1.2.0")),
        ("SUI", CommandMetadata(BinaryName.SUI, "testnet", None)),
        ("site-builder", CommandMetadata(BinaryName.WALRUS_SITES, "testnet", None)),
    ],
)
def test_parse_variants(spec, expected):
    assert parse_component_with_version(spec) == expected


def test_too_many_parts():
    with pytest.raises(SpecError, match="Invalid format"):
        parse_component_with_version("sui@1.2@3")


def test_parse_version_spec_defaults():
    assert parse_version_spec(None) == ("testnet", None)
    assert parse_version_spec("devnet") == ("devnet", None)
    assert parse_version_spec("mainnet-v1.2.3-rc") == ("mainnet", "v1.2.3-rc")
    assert parse_version_spec("v1.60.0") == ("testnet", "v1.60.0")
    assert parse_version_spec("1.60.0") == ("testnet", "1.60.0")


@pytest.mark.parametrize("spec", ["v", "vx.1", "1", "v1", "main", ""])
def test_parse_version_spec_rejects(spec):
    with pytest.raises(SpecError, match="Invalid version format"):
        parse_version_spec(spec)


def test_from_str():
    assert BinaryName.from_str("Move-Analyzer") is BinaryName.MOVE_ANALYZER
    with pytest.raises(SpecError, match="Unknown binary: foo"):
        BinaryName.from_str("foo")


def test_repo_url():
    assert BinaryName.MVR.repo_url() == "https://github.com/MystenLabs/mvr"
    assert BinaryName.WALRUS_SITES.repo_url() == "https://github.com/MystenLabs/walrus-sites"
    assert BinaryName.SUI.repo_url() == "https://github.com/MystenLabs/sui"
    assert BinaryName.MOVE_ANALYZER.repo_url() == BinaryName.SUI.repo_url()


def _binaries():
    return [
        BinaryVersion("walrus", "testnet", "v1.18.2", False),
        BinaryVersion("sui", "testnet", "v1.39.3", True),
        BinaryVersion("mvr", "standalone", "v0.0.5", False),
    ]


def test_format_table_sorted_with_header():
    lines = format_table(_binaries()).splitlines()
    assert lines[1].split() == ["Binary", "Release/Branch", "Version", "Debug"]
    body = [line.split() for line in lines[3:-1]]
    assert body == [
        ["mvr", "standalone", "v0.0.5", "No"],
        ["sui", "testnet", "v1.39.3", "Yes"],
        ["walrus", "testnet", "v1.18.2", "No"],
    ]


def test_format_table_lines_are_aligned():
    lines = format_table(_binaries()).splitlines()
    assert len({len(line) for line in lines}) == 1
    assert set(lines[0]) == {"─"}
    assert set(lines[2]) == {"═"}


def test_print_table(capsys):
    print_table(_binaries())
    assert capsys.readouterr().out == format_table(_binaries()) + "\n"