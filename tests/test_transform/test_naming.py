"""Tests for name normalization."""

import pytest
from ocsf_to_proto.transform.naming import (
    NameNormalizer,
    clean_name,
    last_path_segment,
    to_camel,
    to_field_name,
    to_package_name,
    to_screaming_snake,
)


class TestHelpers:
    """Tests for the plain conversion functions."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("process_activity", "process activity"),
            ("  file_hash ", "file hash"),
            ("a--b..c", "a b c"),
        ],
    )
    def test_clean_name(self, raw: str, expected: str) -> None:
        assert clean_name(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("process activity", "ProcessActivity"),
            ("E2 severity", "E2Severity"),
            ("md5sum", "Md5Sum"),
            ("HTTP request", "HTTPRequest"),
            ("", ""),
        ],
    )
    def test_to_camel(self, raw: str, expected: str) -> None:
        assert to_camel(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("ProcessActivityActivityId Launch", "PROCESS_ACTIVITY_ACTIVITY_ID_LAUNCH"),
            ("FileTypeId Regular File", "FILE_TYPE_ID_REGULAR_FILE"),
            ("HTTPRequest Other", "HTTP_REQUEST_OTHER"),
            ("E2Severity Low", "E2_SEVERITY_LOW"),
        ],
    )
    def test_to_screaming_snake(self, raw: str, expected: str) -> None:
        assert to_screaming_snake(raw) == expected

    def test_to_field_name(self) -> None:
        assert to_field_name("src_endpoint") == "src_endpoint"
        assert to_field_name("Parent-Process") == "parent_process"

    def test_to_package_name(self) -> None:
        assert to_package_name("System Activity") == "system_activity"
        assert to_package_name("network") == "network"

    def test_last_path_segment(self) -> None:
        assert last_path_segment("win/registry_key") == "registry_key"
        assert last_path_segment("process") == "process"


class TestNameNormalizer:
    """Tests for NameNormalizer."""

    def test_normalize(self) -> None:
        normalizer = NameNormalizer()
        assert normalizer.normalize("process_activity") == "ProcessActivity"
        assert normalizer.normalize("network_endpoint") == "NetworkEndpoint"

    def test_composite_names(self) -> None:
        """Enum names combine message and attribute names."""
        normalizer = NameNormalizer()
        assert normalizer.normalize("ProcessActivity activity_id") == "ProcessActivityActivityId"

    def test_preprocessor_applied_first(self) -> None:
        normalizer = NameNormalizer(preprocessor=last_path_segment)
        assert normalizer.normalize("win/registry_key") == "RegistryKey"

    def test_results_are_memoized(self) -> None:
        """A repeated input should be answered from the memo."""
        calls: list[str] = []

        def preprocessor(name: str) -> str:
            calls.append(name)
            return name

        normalizer = NameNormalizer(preprocessor=preprocessor)
        first = normalizer.normalize("user")
        second = normalizer.normalize("user")

        assert first == second == "User"
        assert calls == ["user"]

    def test_empty_input(self) -> None:
        """Inputs without alphanumerics normalize to an empty name."""
        normalizer = NameNormalizer()
        assert normalizer.normalize("") == ""
        assert normalizer.normalize("__") == ""

    def test_normalize_is_idempotent(self) -> None:
        normalizer = NameNormalizer()
        once = normalizer.normalize("file_activity")
        assert normalizer.normalize(once) == once
