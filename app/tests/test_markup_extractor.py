from resource_lint.extract import extract_markup_references, find_markup_tokens
from resource_lint.models import RawReference, SourceFile


def test_finds_app_and_lib_filter_references_in_order() -> None:
    contents = (
        "<h1>{{ 'greeting_text' | skyAppResources }}</h1>\n"
        "<p>{{ 'lib_label' | skyLibResources }}</p>\n"
    )

    assert find_markup_tokens(contents) == ["'greeting_text'", "'lib_label'"]


def test_requires_trailing_space_after_filter_name() -> None:
    assert find_markup_tokens("{{ 'greeting_text' | skyAppResources}}") == []


def test_attribute_binding_captures_only_the_literal() -> None:
    contents = "<button title=\"{{ 'save_button' | skyAppResources }}\"></button>"

    assert find_markup_tokens(contents) == ["'save_button'"]


def test_unquoted_expression_is_captured_as_is() -> None:
    contents = "<span>{{ item.labelKey | skyAppResources }}</span>"

    assert find_markup_tokens(contents) == ["item.labelKey"]


def test_filter_arguments_do_not_change_the_token() -> None:
    contents = "{{ 'count_msg' | skyAppResources : count }}"

    assert find_markup_tokens(contents) == ["'count_msg'"]


def test_references_keep_file_name() -> None:
    files = [
        SourceFile("a.component.html", "{{ 'first' | skyAppResources }}"),
        SourceFile("broken.component.html", ""),
        SourceFile("b.component.html", "{{ 'second' | skyAppResources }}"),
    ]

    assert extract_markup_references(files) == [
        RawReference("a.component.html", "'first'"),
        RawReference("b.component.html", "'second'"),
    ]
