import suite
from loqy import (
    words, capitalize, camel_case, pascal_case, snake_case, kebab_case,
    ellipsis, substring, char_length, chunk_string, configure
)

test = suite.test
assert_that = suite.assert_that
raises = suite.raises


# words()

@test("words splits on separators")
def test_words_separators():
    assert_that(words("hello world") == ["hello", "world"], "space")
    assert_that(words("foo-bar_baz hello") == ["foo", "bar", "baz", "hello"], "mixed separators")
    assert_that(words("_startMiddle_end_") == ["start", "Middle", "end"], "leading and trailing separators")
    assert_that(words("") == [], "empty string")


@test("words splits camel and pascal case")
def test_words_case_boundaries():
    assert_that(words("fooBarBazHello") == ["foo", "Bar", "Baz", "Hello"], "camel")
    assert_that(words("FooBarBazHello") == ["Foo", "Bar", "Baz", "Hello"], "pascal")


@test("words keeps acronyms together until a lowercase letter follows")
def test_words_acronyms():
    assert_that(words("HTTPRequest") == ["HTTP", "Request"], "acronym then word")
    assert_that(words("parseJSON") == ["parse", "JSON"], "trailing acronym")


@test("words splits between letters and digits")
def test_words_digits():
    assert_that(words("Int8Value") == ["Int", "8", "Value"], "Int8Value")
    assert_that(words("version2Release10") == ["version", "2", "Release", "10"], "consecutive digits")
    assert_that(words("hello2world") == ["hello", "2", "world"], "digit then lowercase")


@test("words treats any non-alphanumeric character as a separator")
def test_words_special_characters():
    assert_that(words("hello@world#2023") == ["hello", "world", "2023"], "symbols dropped")
    assert_that(words("こんにちは世界") == ["こんにちは世界"], "uncased letters stay one word")


# case converters

@test("camel_case")
def test_camel_case():
    assert_that(camel_case("Int8Value") == "int8Value", "Int8Value")
    assert_that(camel_case("hello world") == "helloWorld", "space separated")
    assert_that(camel_case("foo-bar_baz hello") == "fooBarBazHello", "mixed separators")
    assert_that(camel_case("helloWorld") == "helloWorld", "already camel")
    assert_that(camel_case("hello_世界") == "hello世界", "unicode")
    assert_that(camel_case("") == "", "empty")


@test("pascal_case")
def test_pascal_case():
    assert_that(pascal_case("hello world") == "HelloWorld", "space separated")
    assert_that(pascal_case("hello---world___test") == "HelloWorldTest", "repeated separators")
    assert_that(pascal_case("HelloWorld") == "HelloWorld", "already pascal")
    assert_that(pascal_case("hello") == "Hello", "single word")


@test("snake_case and kebab_case")
def test_snake_kebab_case():
    assert_that(snake_case("FooBarBazHello") == "foo_bar_baz_hello", "pascal to snake")
    assert_that(snake_case("fooBar baz") == "foo_bar_baz", "mixed to snake")
    assert_that(snake_case("Int8Value") == "int_8_value", "digits are their own word")
    assert_that(kebab_case("helloWorld") == "hello-world", "camel to kebab")
    assert_that(kebab_case("lorem_ipsum") == "lorem-ipsum", "snake to kebab")
    assert_that(kebab_case("HTTPRequest") == "http-request", "acronym")


@test("capitalize upper-cases the first character and lower-cases the rest")
def test_capitalize():
    assert_that(capitalize("hello") == "Hello", "lowercase")
    assert_that(capitalize("WORLD") == "World", "uppercase")
    assert_that(capitalize("rUsT") == "Rust", "mixed")
    assert_that(capitalize("") == "", "empty")
    assert_that(capitalize(" hello") == " hello", "leading whitespace")


# supplements

@test("ellipsis trims and truncates")
def test_ellipsis():
    assert_that(ellipsis("  Hello, World  ", 10) == "Hello, ...", "truncated")
    assert_that(ellipsis("Short", 10) == "Short", "fits")
    assert_that(ellipsis("ExactLength", 11) == "ExactLength", "exact fit")
    assert_that(ellipsis("Trim me", 6) == "Tri...", "cut to six")
    assert_that(ellipsis("Hello", 2) == "...", "length below marker")
    assert_that(ellipsis("", 5) == "", "empty")


@test("ellipsis uses the configured marker")
def test_ellipsis_marker():
    try:
        configure(ellipsis_marker="…")
        assert_that(ellipsis("abcdef", 4) == "abc…", "single character marker")
    finally:
        configure(ellipsis_marker="...")


@test("substring handles negative and out-of-range offsets")
def test_substring():
    text = "Hello, World"
    assert_that(substring(text, 7, 5) == "World", "positive offset")
    assert_that(substring(text, -5, 5) == "World", "negative offset")
    assert_that(substring(text, 100, 5) == "", "offset past end")
    assert_that(substring(text, 0, 100) == text, "length capped")
    assert_that(substring(text, -100, 5) == "Hello", "offset clamped to start")


@test("char_length counts code points")
def test_char_length():
    assert_that(char_length("hello") == 5, "ascii")
    assert_that(char_length("こんにちは") == 5, "japanese")
    assert_that(char_length("✨🌟💫") == 3, "emoji")
    assert_that(char_length("") == 0, "empty")


@test("chunk_string splits into fixed-size pieces")
def test_chunk_string():
    assert_that(chunk_string("hello", 2) == ["he", "ll", "o"], "odd length")
    assert_that(chunk_string("rust", 10) == ["rust"], "size larger than text")
    assert_that(chunk_string("", 2) == [""], "empty string")
    assert_that(chunk_string("こんにちは", 2) == ["こん", "にち", "は"], "unicode")
    with raises(ValueError):
        chunk_string("abc", 0)


if __name__ == "__main__":
    suite.main(title="loqy strings test suite")
