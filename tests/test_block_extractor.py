"""Tests for isolating dependency blocks."""

from library_change.core.block_extractor import extract_block


def test_simple_block():
    """Test that only the interior of the block is returned."""
    lines = [
        "apply plugin: 'java'",
        "dependencies {",
        "    implementation 'com.x:lib:1.0'",
        "}",
        "version = '1.0'",
    ]
    assert extract_block(lines) == ["    implementation 'com.x:lib:1.0'", ""]


def test_header_with_surrounding_whitespace():
    """Test that the header may be indented and followed by whitespace."""
    lines = ["  dependencies   {  ", "api 'a:b:1'", "}"]
    assert extract_block(lines) == ["api 'a:b:1'", ""]


def test_header_without_space_before_brace():
    """Test that ``dependencies{`` opens a block."""
    assert extract_block(["dependencies{", "api 'a:b:1'", "}"]) == ["api 'a:b:1'", ""]


def test_header_must_end_the_line():
    """Test that content after the opening brace prevents a match."""
    lines = ["dependencies { implementation 'a:b:1' }", "implementation 'c:d:2'"]
    assert extract_block(lines) == []


def test_nested_braces_are_kept():
    """Test that nested braces belong to the interior while the outer close does not."""
    lines = [
        "dependencies {",
        "    implementation('com.x:lib:1.0') {",
        "        exclude group: 'org.foo'",
        "    }",
        "    testImplementation 'junit:junit:4.13'",
        "}",
    ]
    assert extract_block(lines) == [
        "    implementation('com.x:lib:1.0') {",
        "        exclude group: 'org.foo'",
        "    }",
        "    testImplementation 'junit:junit:4.13'",
        "",
    ]


def test_text_after_closing_brace_is_discarded():
    """Test that scanning stops where the block closes mid-line."""
    lines = ["dependencies {", "    api 'a:b:1' } // trailing", "api 'c:d:2'"]
    assert extract_block(lines) == ["    api 'a:b:1' "]


def test_multiple_blocks_are_concatenated():
    """Test that interiors of several blocks end up in one sequence."""
    lines = [
        "buildscript {",
        "    dependencies {",
        "        classpath 'com.android.tools.build:gradle:7.0.0'",
        "    }",
        "}",
        "dependencies {",
        "    implementation 'com.x:lib:1.0'",
        "}",
    ]
    assert extract_block(lines) == [
        "        classpath 'com.android.tools.build:gradle:7.0.0'",
        "    ",
        "    implementation 'com.x:lib:1.0'",
        "",
    ]


def test_no_block():
    """Test that a file without a dependency block yields nothing."""
    assert extract_block(["apply plugin: 'java'", "repositories {", "}"]) == []


def test_unbalanced_block_emits_remaining_lines():
    """Test that an unclosed block emits every following line without raising."""
    lines = ["dependencies {", "    api 'a:b:1'", "    implementation('c:d:2') {"]
    assert extract_block(lines) == ["    api 'a:b:1'", "    implementation('c:d:2') {"]


def test_lines_outside_blocks_never_leak():
    """Test that nothing scanned outside a block reaches the output."""
    lines = ["outside 'x:y:1'", "dependencies {", "inside", "}", "after 'z:w:2'"]
    output = extract_block(lines)
    assert all("outside" not in line and "after" not in line for line in output)


def test_empty_lines_are_preserved():
    """Test that each interior line yields exactly one output line."""
    assert extract_block(["dependencies {", "", "api 'a:b:1'", "", "}"]) == [
        "",
        "api 'a:b:1'",
        "",
        "",
    ]


def test_marked_header_opens_block():
    """Test that a header added or removed by the commit still opens a block."""
    assert extract_block(["+dependencies {", "+api 'a:b:1'", "+}"]) == ["+api 'a:b:1'", "+"]
    assert extract_block(["-  dependencies {", "-api 'a:b:1'", "-}"]) == ["-api 'a:b:1'", "-"]


def test_marker_must_lead_the_header():
    """Test that other text before the header keyword prevents a match."""
    assert extract_block(["x dependencies {", "api 'a:b:1'", "}"]) == []
