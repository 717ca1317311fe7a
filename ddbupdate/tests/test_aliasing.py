# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from ddbupdate import alias, AliasContext, IdentifierTooLongError
from ddbupdate.aliasing import camel_case, split_words, truncate, check_limit
from ddbupdate.diff_format import make_node


LONG_NAME = (
    "thisIsAVeryLongAttributeNameAndHadToKeepTypingRandomWordsToTryToGetUpTo255"
    "CharactersYouWouldThinkThatThisIsEnoughOrThatItWillHappenOftenWhenYouHave"
    "AnAttributeThatLongYouMightAlsoOpenAnIssueAboutItPleaseDoNotSinceTheLibrary"
    "DoesTrimYourNamesAndLimitAliasLen")


def test_split_words():
    assert split_words("relatedItems[3]") == ["related", "Items", "3"]
    assert split_words("HTMLParser") == ["HTML", "Parser"]
    assert split_words("left-view") == ["left", "view"]
    assert split_words("__a__b") == ["a", "b"]
    assert split_words("") == []


@pytest.mark.parametrize("parts, expected", [
    (("left-view",), "leftView"),
    (("Safety.Warning",), "safetyWarning"),
    (("1atBeginning",), "1AtBeginning"),
    (("name with space",), "nameWithSpace"),
    (("prefix-suffix",), "prefixSuffix"),
    (("expected", "version"), "expectedVersion"),
    (("InvalidValue", "parent"), "invalidValueParent"),
    (("relatedItems", 3), "relatedItems3"),
    (("productReview", "fiveStar", 2), "productReviewFiveStar2"),
    (("HTMLParser",), "htmlParser"),
    (("", "title"), "title"),
    ((None, "title"), "title"),
    (("---",), ""),
])
def test_camel_case(parts, expected):
    assert camel_case(*parts) == expected


def test_camel_case_long_name_unchanged():
    assert camel_case(LONG_NAME) == LONG_NAME


def test_check_limit():
    check_limit("x" * 255)
    with pytest.raises(IdentifierTooLongError) as e:
        check_limit("x" * 256)
    assert e.value.limit == 255
    assert e.value.name == "x" * 256
    assert "exceeds DynamoDB limit of [255]" in str(e.value)
    # Errors are ValueErrors
    with pytest.raises(ValueError):
        check_limit("abc", limit=2)


def test_truncate():
    context = AliasContext()
    assert truncate("short", context=context) == "short"
    assert context.counter == 1

    name = "x" * 300
    truncated = truncate(name, context=context)
    assert truncated == "x" * 253 + "1"
    assert len(truncated) == 254
    assert truncate(name, context=context) == "x" * 253 + "2"
    assert context.counter == 3

    assert truncate("abcdef", max_length=4, context=AliasContext(counter=12)) == "ab12"


def test_alias_names_and_values():
    names, values = {}, {}
    a = alias(make_node('$.pictures["left-view"]', "http://x"), names, values)
    assert a.path == "#pictures.#leftView"
    assert a.value == ":picturesLeftView"
    assert names == {"#pictures": "pictures", "#leftView": "left-view"}
    assert values == {":picturesLeftView": "http://x"}


def test_alias_keeps_subscripts():
    names, values = {}, {}
    a = alias(make_node("$.relatedItems[3]", 1000), names, values)
    assert a.path == "#relatedItems[3]"
    assert a.value == ":relatedItems3"

    a = alias(make_node("$.matrix[0][1].cell", "c"), names, values)
    assert a.path == "#matrix[0][1].#cell"
    assert a.value == ":matrix01Cell"


def test_alias_without_values():
    names = {}
    a = alias(make_node("$.title", "Bicycle"), names)
    assert a.path == "#title"
    assert a.value == "Bicycle"
    assert names == {"#title": "title"}


def test_alias_with_prefix():
    names, values = {}, {}
    context = AliasContext(prefix="expected")
    a = alias(make_node("$.version", 1), names, values, context)
    assert a.path == "#expectedVersion"
    assert a.value == ":expectedVersion"

    # Explicit prefix wins over the one of the context
    a = alias(make_node("$.version", 2), names, values, context, prefix="")
    assert a.path == "#version"
    assert a.value == ":version"
    assert names == {"#expectedVersion": "version", "#version": "version"}


def test_alias_same_name_reused():
    names, values = {}, {}
    context = AliasContext()
    alias(make_node("$.parent.child", 1), names, values, context)
    alias(make_node("$.parent.other", 2), names, values, context)
    assert names == {"#parent": "parent", "#child": "child", "#other": "other"}
    assert context.counter == 1


def test_alias_name_collision():
    names, values = {}, {}
    context = AliasContext()
    a = alias(make_node('$["left-view"]', 1), names, values, context)
    b = alias(make_node("$.leftView", 2), names, values, context)
    assert a.path == "#leftView"
    assert b.path == "#leftView1"
    assert names == {"#leftView": "left-view", "#leftView1": "leftView"}
    # Every alias maps back to exactly one name
    assert len(set(names.values())) == len(names)
    assert a.value != b.value
    assert values[a.value] == 1
    assert values[b.value] == 2


def test_alias_value_collision():
    names, values = {}, {}
    context = AliasContext()
    a = alias(make_node("$.consumed", 0), names, values, context)
    b = alias(make_node("$.consumed", 100), names, values, context)
    assert a.path == b.path == "#consumed"
    assert (a.value, b.value) == (":consumed", ":consumed1")
    assert values == {":consumed": 0, ":consumed1": 100}


def test_alias_fallbacks():
    names, values = {}, {}
    a = alias(make_node('$["---"]', 1), names, values)
    assert a.path == "#attr"
    assert a.value == ":value"
    assert names == {"#attr": "---"}


def test_alias_long_name_truncated_once():
    names, values = {}, {}
    context = AliasContext()
    a = alias(make_node("$.review." + LONG_NAME, "x"), names, values, context)
    b = alias(make_node("$." + LONG_NAME + "[0]", "y"), names, values, context)

    name_alias = "#" + LONG_NAME[:253] + "1"
    assert a.path == "#review." + name_alias
    assert b.path == name_alias + "[0]"
    assert names[name_alias] == LONG_NAME
    assert a.value == ":review" + LONG_NAME[0].upper() + LONG_NAME[1:247] + "2"
    assert b.value == ":" + LONG_NAME[:253] + "3"
    for identifier in list(names) + list(values):
        assert len(identifier) <= 255


def test_alias_distinct_long_names_with_prefix():
    # Both names camel case to the same first 253 characters
    first, second = "x" * 250 + "aaaaa", "x" * 250 + "bbbbb"
    names, values = {}, {}
    context = AliasContext(prefix="expected")
    a = alias(make_node("$." + first, 1), names, values, context)
    b = alias(make_node("$." + second, 2), names, values, context)

    head = "expectedX" + "x" * 244
    assert a.path == "#" + head + "1"
    assert b.path == "#" + head + "3"
    assert names == {a.path: first, b.path: second}
    assert values == {":" + head + "2": 1, ":" + head + "4": 2}
    for identifier in list(names) + list(values):
        assert len(identifier) <= 255

    # Aliasing again reuses the registered aliases
    assert alias(make_node("$." + second, 3), names, None, context).path == b.path
    assert len(names) == 2


def test_alias_name_too_long():
    with pytest.raises(IdentifierTooLongError):
        alias(make_node("$.parent." + "y" * 256, 1), {}, {})


def test_alias_context_repr():
    assert repr(AliasContext("p", 3)) == "AliasContext(prefix='p', counter=3)"
