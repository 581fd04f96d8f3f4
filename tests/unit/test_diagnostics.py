"""Tests for Diagnostic rendering."""

from rawhash.diagnostics import Diagnostic
from rawhash.literal import RawLiteral, SourceLocation
from rawhash.suggestion import suggest_for_literal


def _diagnostic(line: str, literal_text: str, content: str, hashes: int) -> Diagnostic:
    start = line.index(literal_text)
    literal = RawLiteral(
        original_hash_count=hashes,
        content=content,
        span=SourceLocation(
            start_line=3,
            start_col=start,
            end_line=3,
            end_col=start + len(literal_text),
        ),
    )
    return Diagnostic.from_literal(literal, suggest_for_literal(literal), "src/lib.rs")


class TestDiagnostic:
    def test_header(self):
        diag = _diagnostic('    let s = r#"abc"#;', 'r#"abc"#', "abc", 1)
        assert diag.header() == (
            "src/lib.rs:3:13: warning: unnecessary hashes around raw string literal"
            " [needless_raw_string_hashes]"
        )

    def test_help(self):
        diag = _diagnostic('    let s = r#"abc"#;', 'r#"abc"#', "abc", 1)
        assert diag.help == "remove all the hashes around the string literal"

    def test_original_text(self):
        diag = _diagnostic('    let s = r#"abc"#;', 'r#"abc"#', "abc", 1)
        assert diag.original_text == 'r#"abc"#'

    def test_diff_lines(self):
        line = '    let s = r##"a "b" c"##;'
        diag = _diagnostic(line, 'r##"a "b" c"##', 'a "b" c', 2)
        source_lines = ["fn f() {", "", line, "}"]
        assert diag.diff_lines(source_lines) == [
            '- ' + line,
            '+     let s = r#"a "b" c"#;',
        ]

    def test_format_without_source(self):
        diag = _diagnostic('    let s = r#"abc"#;', 'r#"abc"#', "abc", 1)
        assert diag.format().splitlines() == [
            diag.header(),
            "  help: remove all the hashes around the string literal",
        ]

    def test_format_with_source(self):
        line = '    let s = r#"abc"#;'
        diag = _diagnostic(line, 'r#"abc"#', "abc", 1)
        rendered = diag.format(["", "", line])
        assert '  - ' + line in rendered
        assert '  +     let s = r"abc";' in rendered

    def test_diff_lines_drop_carriage_returns(self):
        line = '    let s = r#"abc"#;'
        diag = _diagnostic(line, 'r#"abc"#', "abc", 1)
        source_lines = ["fn f() {\r", "\r", line + "\r", "}\r", ""]
        assert diag.diff_lines(source_lines) == [
            "- " + line,
            '+     let s = r"abc";',
        ]

    def test_multiline_rewrite_drops_embedded_carriage_returns(self):
        literal = RawLiteral(
            original_hash_count=1,
            content="\r\none\r\n",
            span=SourceLocation(start_line=1, start_col=8, end_line=3, end_col=2),
        )
        diag = Diagnostic.from_literal(literal, suggest_for_literal(literal))
        source_lines = ['let s = r#"\r', "one\r", '"#;\r']
        assert diag.diff_lines(source_lines) == [
            '- let s = r#"',
            "- one",
            '- "#;',
            '+ let s = r"',
            "+ one",
            '+ ";',
        ]
