"""Shared pytest configuration for hmdoc tests."""

import pytest

PARSER_SRC = """\
/**
 *\thmdoc.Parser
 *\twritten by Joel Dentici
 *\ton 7/19/2017
 *
 *\tParses hmdoc comments into a list of DocModules
 */

/**
 *\tparseModule :: [string] -> DocModule
 *
 *\tParses the comments into a DocModule object.
 */
function parseModule(comments) {}

/**
 *\tgetDocComments :: string -> [string]
 *
 *\tExtracts comments from the source code and
 *\treturns a list of comments.
 */
function getDocComments(src) {}
"""

READ_SRC = """\
/**
 *\thmdoc.Read
 *\twritten by Joel Dentici and Ada Lovelace
 *\ton 7/20/2017
 *
 *\tReads the source of each file in
 *\ta directory (recursively).
 */

/**
 *\treadFiles :: string -> [string]
 *
 *\tReads all the files in a directory.
 */
function readFiles(dir) {}
"""

PLAIN_SRC = """\
// no doc comments in here
function plain() { return 1; }
"""


@pytest.fixture
def parser_src():
    return PARSER_SRC


@pytest.fixture
def read_src():
    return READ_SRC


@pytest.fixture
def plain_src():
    return PLAIN_SRC


@pytest.fixture
def source_tree(tmp_path):
    """A small project tree:

    src/
        parser.js
        notes.txt
        .hidden.js
        lib/
            read.js
            plain.js
        .cache/
            cached.js
    """
    root = tmp_path / "src"
    (root / "lib").mkdir(parents=True)
    (root / ".cache").mkdir()
    (root / "parser.js").write_text(PARSER_SRC)
    (root / "notes.txt").write_text("not a source file")
    (root / ".hidden.js").write_text(READ_SRC)
    (root / "lib" / "read.js").write_text(READ_SRC)
    (root / "lib" / "plain.js").write_text(PLAIN_SRC)
    (root / ".cache" / "cached.js").write_text(READ_SRC)
    return root
