"""Tests for acme_dns01.names."""

import pytest

from acme_dns01.errors import InvalidNameError
from acme_dns01.names import DnsName, labels, normalize, to_fqdn, un_fqdn


class TestNormalize:
    def test_trailing_dot_is_optional(self):
        assert normalize("example.com") == normalize("example.com.")

    def test_case_is_folded(self):
        assert normalize("_ACME-Challenge.Example.COM.") == normalize("_acme-challenge.example.com")

    def test_fqdn_has_single_trailing_dot(self):
        name = normalize("example.com.")
        assert name.fqdn == "example.com."
        assert name.display == "example.com"
        assert str(name) == "example.com"

    def test_strips_surrounding_whitespace(self):
        assert normalize("  example.com \n").labels == ("example", "com")

    def test_single_label(self):
        assert normalize("localhost").labels == ("localhost",)

    def test_passes_through_existing_name(self):
        name = DnsName(("example", "com"))
        assert normalize(name) is name

    def test_hashable_and_equal_by_labels(self):
        assert len({normalize("a.example.com"), normalize("A.EXAMPLE.COM.")}) == 1

    @pytest.mark.parametrize(
        "bad",
        ["", "   ", ".", "..", "example..com", ".example.com", "example.com..", "a" * 64 + ".com"],
    )
    def test_rejects_malformed_names(self, bad):
        with pytest.raises(InvalidNameError) as exc_info:
            normalize(bad)
        assert exc_info.value.name == bad

    def test_rejects_overlong_name(self):
        name = ".".join(["a" * 60] * 5)
        with pytest.raises(InvalidNameError, match="exceeds 253"):
            normalize(name)

    def test_name_length_is_counted_in_octets(self):
        # 154 characters but 304 octets once UTF-8 encoded
        name = ".".join(["é" * 30] * 5)
        with pytest.raises(InvalidNameError, match="exceeds 253 octets"):
            normalize(name)

    def test_accepts_name_of_exactly_253_octets(self):
        name = ".".join(["a" * 63] * 3 + ["a" * 61])
        assert len(normalize(name).display) == 253

    def test_error_mentions_offending_name(self):
        with pytest.raises(InvalidNameError, match="example..com"):
            normalize("example..com")


class TestLabels:
    def test_most_specific_first(self):
        assert labels("_acme-challenge.foo.bar.example.com.") == (
            "_acme-challenge",
            "foo",
            "bar",
            "example",
            "com",
        )


class TestIsSubdomainOf:
    def test_label_suffix(self):
        assert normalize("_acme-challenge.example.com").is_subdomain_of(normalize("example.com"))

    def test_equal_names(self):
        assert normalize("example.com").is_subdomain_of(normalize("example.com."))

    def test_string_suffix_is_not_enough(self):
        assert not normalize("notexample.com").is_subdomain_of(normalize("example.com"))

    def test_parent_is_not_subdomain_of_child(self):
        assert not normalize("example.com").is_subdomain_of(normalize("sub.example.com"))


class TestFqdnHelpers:
    def test_to_fqdn(self):
        assert to_fqdn("example.com") == "example.com."
        assert to_fqdn("example.com.") == "example.com."

    def test_un_fqdn(self):
        assert un_fqdn("example.com.") == "example.com"
        assert un_fqdn("example.com") == "example.com"
