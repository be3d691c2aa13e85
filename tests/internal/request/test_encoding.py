"""Tests for form encoding of parameter structures."""

from activecampaign_sdk._internal.request.encoding import encode_params, encode_query


class TestFlatParams:
    """Tests for scalar values."""

    def test_flat_pairs_in_insertion_order(self):
        """Should emit key=value pairs in insertion order."""
        body = encode_params({"email": "a@example.com", "first_name": "Ann"})
        assert body == "email=a%40example.com&first_name=Ann"

    def test_values_are_percent_encoded(self):
        """Should percent-encode values, spaces as plus."""
        assert encode_params({"name": "Ann & Bob"}) == "name=Ann+%26+Bob"

    def test_scalar_coercion(self):
        """Should encode booleans, None and whole floats like form fields."""
        body = encode_params({"a": True, "b": False, "c": None, "d": 3.0, "e": 1.5, "f": 7})
        assert body == "a=1&b=&c=&d=3&e=1.5&f=7"

    def test_trailing_separator_stripped(self):
        """Should not end with a separator even when the last value is empty."""
        body = encode_params({"a": "1", "b": ""})
        assert body == "a=1&b="
        assert not body.endswith("&")


class TestRawString:
    """Tests for non-structured parameters."""

    def test_string_wrapped_as_data(self):
        """Should send a bare string as a single data field."""
        assert encode_params('{"x":1}') == "data=%7B%22x%22%3A1%7D"

    def test_plain_string(self):
        """Should wrap plain text."""
        assert encode_params("hello") == "data=hello"


class TestMultiValueField:
    """Tests for the field[...,0] convention."""

    def test_values_joined_with_double_pipe(self):
        """Should join list values with || and encode the key."""
        body = encode_params({"field[foo,0]": ["a", "b", "c"]})
        assert body == "field%5Bfoo%2C0%5D=a%7C%7Cb%7C%7Cc"

    def test_personalization_tag_key(self):
        """Should match any field key ending in ,0]."""
        body = encode_params({"field[%COLOR%,0]": ["red", "blue"]})
        assert body == "field%5B%25COLOR%25%2C0%5D=red%7C%7Cblue"

    def test_scalar_field_value_not_joined(self):
        """Should leave scalar field values as flat pairs."""
        assert encode_params({"field[foo,0]": "red"}) == "field[foo,0]=red"


class TestAssociativeMembers:
    """Tests for associative sub-structures."""

    def test_group_membership(self):
        """Should emit key[k]=v for each member in order."""
        body = encode_params({"group": {"2": "2", "3": "3"}})
        assert body == "group[2]=2&group[3]=3"

    def test_list_membership(self):
        """Should use list positions as member keys."""
        body = encode_params({"p": [5, 6]})
        assert body == "p[0]=5&p[1]=6"

    def test_nested_members_skipped(self):
        """Should silently drop members whose value is itself a structure."""
        body = encode_params({"p": {"1": "1", "2": {"deep": "x"}, "3": "3"}})
        assert body == "p[1]=1&p[3]=3"

    def test_member_keys_encoded(self):
        """Should percent-encode member keys."""
        assert encode_params({"p": {"a b": "1"}}) == "p[a+b]=1"

    def test_mixed_with_flat(self):
        """Should mix flat pairs and member pairs."""
        body = encode_params({"email": "x@y.z", "p": {"1": 1}, "status": {"1": 1}})
        assert body == "email=x%40y.z&p[1]=1&status[1]=1"


class TestRepeatingGroups:
    """Tests for lists of sub-structures (two levels deep)."""

    def test_list_of_groups(self):
        """Should index each group's fields by position."""
        body = encode_params([
            {"email": "a@x.io", "first_name": "A"},
            {"email": "b@x.io", "first_name": "B"},
        ])
        assert body == (
            "email[0]=a%40x.io&first_name[0]=A&email[1]=b%40x.io&first_name[1]=B"
        )

    def test_group_with_nested_members(self):
        """Should emit name[index][inner]=value for nested members."""
        body = encode_params([{"email": "a@x.io", "p": {"3": 3, "4": 4}}])
        assert body == "email[0]=a%40x.io&p[0][3]=3&p[0][4]=4"

    def test_integer_keys_in_mapping(self):
        """Should treat integer mapping keys like list positions."""
        body = encode_params({7: {"email": "a@x.io"}})
        assert body == "email[7]=a%40x.io"

    def test_scalar_entries_in_list(self):
        """Should emit plain index pairs for scalar list entries."""
        assert encode_params(["a", "b"]) == "0=a&1=b"


class TestEncodeQuery:
    """Tests for query string encoding."""

    def test_mapping_encoded(self):
        """Should encode mappings like a body."""
        assert encode_query({"ids": "1,2", "full": 1}) == "ids=1%2C2&full=1"

    def test_string_passes_through(self):
        """Should pass pre-built query strings through without separators."""
        assert encode_query("&ids=all&") == "ids=all"
