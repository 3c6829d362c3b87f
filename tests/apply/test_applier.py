import textwrap

import pytest

from fuzzyedit import (
    ContractError,
    EditBlock,
    FileEditApplier,
    FuzzyMatcher,
    HunkStatus,
    PatchFailedError,
    apply_edits,
    apply_edits_from_response,
    preview_edits,
)


def test_no_blocks_is_a_no_op():
    result = apply_edits("some text\n", [])
    assert result.before_content == result.after_content == "some text\n"
    assert result.hunks == ()
    assert result.all_successful
    assert not result.has_changes
    assert result.summary == "No changes"


@pytest.mark.parametrize("order", [(0, 1), (1, 0)])
def test_independent_edits_in_any_order(order):
    blocks = [EditBlock("AAA", "X", 0), EditBlock("CCC", "Y", 1)]
    result = apply_edits("AAABBBCCC", [blocks[i] for i in order])
    assert result.after_content == "XBBBY"
    assert result.all_successful
    assert [h.block_index for h in result.hunks] == [0, 1]
    assert all(h.status is HunkStatus.APPLIED for h in result.hunks)


def test_edits_change_line_counts_without_shifting_each_other():
    doc = "a\nb\nc\nd\n"
    result = apply_edits(doc, [EditBlock("a", "a1\na2", 0), EditBlock("c\nd", "z", 1)])
    assert result.after_content == "a1\na2\nb\nz\n"
    first, second = result.hunks
    assert (first.start_line, first.end_line, first.line_delta) == (1, 1, 1)
    assert (second.start_line, second.end_line, second.line_delta) == (3, 4, -1)


def test_overlap_fails_the_whole_batch():
    result = apply_edits("ABCDE", [EditBlock("ABC", "1", 0), EditBlock("CDE", "2", 1)])
    assert result.before_content == result.after_content == "ABCDE"
    assert not result.all_successful
    (hunk,) = result.hunks
    assert hunk.status is HunkStatus.FAILED
    assert hunk.message == "Blocks 1 and 2 overlap at offsets 0-3 and 2-5"


def test_failed_block_does_not_stop_the_others():
    doc = "keep\nchange me\n"
    result = apply_edits(
        doc, [EditBlock("change me", "changed", 0), EditBlock("absent text that is nowhere", "x", 1)]
    )
    assert result.after_content == "keep\nchanged\n"
    assert not result.all_successful
    applied, failed = result.hunks
    assert applied.status is HunkStatus.APPLIED
    assert failed.status is HunkStatus.FAILED
    assert failed.start_line is None
    assert failed.message.startswith("ERROR: ")
    assert result.summary == "Applied: 1/2, failed: 1"


def test_ambiguous_block_becomes_failed_hunk_with_candidates():
    doc = "x = 1\ny = 2\nx = 1\n"
    result = apply_edits(doc, [EditBlock("x = 1", "x = 9")])
    assert result.after_content == doc
    (hunk,) = result.hunks
    assert hunk.status is HunkStatus.FAILED
    assert "Found 2 similar matches" in hunk.message
    assert "--- Candidate 1 (lines 1-1, similarity: 100%) ---" in hunk.message


def test_hunk_message_names_strategy():
    doc = "int main() {\n    int x = computeTotal(a, b);\n    return x;\n}\n"
    result = apply_edits(
        doc,
        [
            EditBlock("int main() {", "int main(void) {", 0),
            EditBlock("int x = computeTotl(a, b);", "    int x = computeTotal(a, c);", 1),
        ],
    )
    assert result.all_successful
    exact, fuzzy = result.hunks
    assert exact.message == "Applied using strategy: Exact match"
    assert fuzzy.message.startswith("Applied using strategy: Similarity match (")
    assert fuzzy.message.endswith("% similarity)")
    assert fuzzy.before_text == "    int x = computeTotal(a, b);"
    assert "computeTotal(a, c)" in result.after_content


def test_indentation_drift_is_applied_in_place():
    doc = textwrap.dedent(
        """\
        class A:
            def run(self):
                return 1
        """
    )
    result = apply_edits(doc, [EditBlock("def run(self):\n    return 1", "    def run(self):\n        return 2")])
    assert result.all_successful
    assert result.after_content == doc.replace("return 1", "return 2")
    assert result.hunks[0].message == "Applied using strategy: Indentation normalization"


def test_deletion_block():
    result = apply_edits("a\nremove me\nb\n", [EditBlock("remove me\n", "")])
    assert result.after_content == "a\nb\n"


def test_insertion_block_fails_cleanly():
    result = apply_edits("a\n", [EditBlock("", "new")])
    assert not result.all_successful
    assert "must not be empty" in result.hunks[0].message


def test_apply_from_response():
    doc = "def greet():\n    print('hi')\n"
    response = textwrap.dedent(
        """\
        Sure, here is the change:

        ```python
        <<<<<<< SEARCH
            print('hi')
        =======
            print('hello')
        >>>>>>> REPLACE
        ```
        """
    )
    result = apply_edits_from_response(doc, response)
    assert result.all_successful
    assert result.after_content == "def greet():\n    print('hello')\n"


def test_apply_from_response_without_blocks():
    result = apply_edits_from_response("doc\n", "I could not find anything to change.")
    assert result.after_content == "doc\n"
    assert result.all_successful
    assert result.hunks == ()


def test_apply_from_response_validation_error_skips_matching():
    result = apply_edits_from_response("doc\n", "<<<<<<< SEARCH\n   \n=======\n>>>>>>> REPLACE")
    assert not result.all_successful
    assert result.after_content == "doc\n"
    (hunk,) = result.hunks
    assert hunk.message == "Block 1: empty SEARCH text"


def test_preview_marks_hunks_and_keeps_computed_content():
    result = preview_edits("AAABBBCCC", [EditBlock("BBB", "-", 0), EditBlock("nope nope nope", "?", 1)])
    assert result.after_content == "AAA-CCC"
    assert [h.status for h in result.hunks] == [HunkStatus.PREVIEW, HunkStatus.FAILED]
    assert len(result.applied_hunks) == 1


def test_custom_matcher_threshold():
    applier = FileEditApplier(FuzzyMatcher(threshold=0.99))
    doc = "int x = computeTotal(a, b);\n"
    result = applier.apply(doc, [EditBlock("int x = computeTotl(a, b);", "y")])
    assert not result.all_successful
    assert "Candidate 1" in result.failure_feedback()


def test_raise_for_failure():
    ok = apply_edits("abc", [EditBlock("abc", "xyz")])
    assert ok.raise_for_failure() is ok

    bad = apply_edits("abc", [EditBlock("something else entirely", "xyz")])
    with pytest.raises(PatchFailedError) as exc:
        bad.raise_for_failure()
    assert exc.value.result is bad
    assert exc.value.feedback.startswith("The following changes could not be applied:")


def test_contract_violations():
    with pytest.raises(ContractError):
        apply_edits("doc", None)
    with pytest.raises(ContractError):
        apply_edits("doc", ["not a block"])
    with pytest.raises(TypeError):
        apply_edits(None, [EditBlock("a", "b")])
