import pytest

from hookrunner.commands import (
    FilesTemplate,
    Job,
    escape_files,
    get_n_chars,
    intersect,
    replace_in_chunks,
    replace_positional_arguments,
    replace_quoted,
)


@pytest.mark.parametrize(
    "source, n, cut, rest",
    [
        (["str1", "str2", "str3"], 0, ["str1"], ["str2", "str3"]),
        (["str1", "str2", "str3"], 4, ["str1"], ["str2", "str3"]),
        (["str1", "str2", "str3"], 6, ["str1"], ["str2", "str3"]),
        (["str1", "str2", "str3"], 8, ["str1"], ["str2", "str3"]),
        (["str1", "str2", "str3"], 9, ["str1", "str2"], ["str3"]),
        (["str1", "str2", "str3"], 500, ["str1", "str2", "str3"], []),
        ([], 2, [], []),
    ],
)
def test_get_n_chars(source, n, cut, rest):
    assert get_n_chars(source, n) == (cut, rest)


@pytest.mark.parametrize(
    "command, templates, maxlen, execs, files",
    [
        (
            "echo {staged_files}",
            {"{staged_files}": (["file1", "file2", "file3"], 1)},
            300,
            ["echo file1 file2 file3"],
            ["file1", "file2", "file3"],
        ),
        (
            "echo {staged_files}",
            {"{staged_files}": (["file1", "file2", "file3"], 1)},
            10,
            ["echo file1", "echo file2", "echo file3"],
            ["file1", "file2", "file3"],
        ),
        (
            "echo {files} && git add {files}",
            {"{files}": (["file1", "file2", "file3"], 2)},
            49,
            [
                "echo file1 file2 && git add file1 file2",
                "echo file3 && git add file3",
            ],
            ["file1", "file2", "file3"],
        ),
        (
            "echo {files} && git add {files}",
            {"{files}": (["file1", "file2", "file3"], 2)},
            51,
            ["echo file1 file2 file3 && git add file1 file2 file3"],
            ["file1", "file2", "file3"],
        ),
        (
            "echo {push_files} && git add {files}",
            {
                "{push_files}": (["push-file"], 1),
                "{files}": (["file1", "file2"], 1),
            },
            10,
            [
                "echo push-file && git add file1",
                "echo push-file && git add file2",
            ],
            ["push-file", "file1", "file2"],
        ),
        (
            "echo {push_files} && git add {files}",
            {
                "{push_files}": (["push1", "push2", "push3"], 1),
                "{files}": (["file1", "file2"], 1),
            },
            27,
            [
                "echo push1 && git add file1",
                "echo push2 && git add file2",
                "echo push3 && git add file2",
            ],
            ["push1", "push2", "push3", "file1", "file2"],
        ),
    ],
)
def test_replace_in_chunks(command, templates, maxlen, execs, files):
    built = {
        name: FilesTemplate(files=list(names), count=count)
        for name, (names, count) in templates.items()
    }
    job = replace_in_chunks(command, built, maxlen)
    assert sorted(job.files) == sorted(files)
    assert job.execs == execs


def test_replace_in_chunks_without_templates():
    job = replace_in_chunks("echo hi", {}, 10)
    assert job == Job(execs=["echo hi"], files=[])


@pytest.mark.parametrize(
    "source, substitution, files, result",
    [
        ("echo", "{staged_files}", ["a", "b"], "echo"),
        ("echo {staged_files}", "{staged_files}", ["test.rb", "README"], "echo test.rb README"),
        (
            "echo '{staged_files}'",
            "{staged_files}",
            ["test.rb", "README"],
            "echo 'test.rb' 'README'",
        ),
        (
            'echo "{staged_files}"',
            "{staged_files}",
            ["test.rb", "README"],
            'echo "test.rb" "README"',
        ),
        (
            'echo "{staged_files}"',
            "{staged_files}",
            ["'test me.rb'", "README"],
            'echo "test me.rb" "README"',
        ),
        (
            "echo '{staged_files}'",
            "{staged_files}",
            ["'test me.rb'", "README"],
            "echo 'test me.rb' 'README'",
        ),
        (
            "echo {staged_files}",
            "{staged_files}",
            ["'test me.rb'", "README"],
            "echo 'test me.rb' README",
        ),
        (
            'echo "{staged_files}" {staged_files}',
            "{staged_files}",
            ["'test me.rb'", "README"],
            "echo \"test me.rb\" \"README\" 'test me.rb' README",
        ),
    ],
)
def test_replace_quoted(source, substitution, files, result):
    assert replace_quoted(source, substitution, files) == result


def test_replace_positional_arguments():
    text = "run {0} first={1} second={2}"
    assert replace_positional_arguments(text, ["a", "b"]) == "run a b first=a second=b"


def test_replace_positional_arguments_without_args():
    assert replace_positional_arguments("x {0} {1}", []) == "x  {1}"


def test_escape_files_quotes_and_drops_empty():
    assert escape_files(["plain.rb", "", "with space.rb"]) == [
        "plain.rb",
        "'with space.rb'",
    ]


def test_intersect():
    assert intersect(["a", "b"], ["c", "b"]) is True
    assert intersect(["a"], ["c"]) is False
    assert intersect([], ["c"]) is False