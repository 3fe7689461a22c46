"""
Shared pytest fixtures for the viewer test suite.

Log output goes to a temporary directory so test runs do not write into
the project's logs/ folder.
"""

import os
import tempfile

os.environ.setdefault("SYNTAX_VIEWER_LOG_DIR", tempfile.mkdtemp(prefix="syntax-viewer-logs-"))

import pytest

from syntax_viewer.core.parser_cst import parse_code


SAMPLE_SOURCE = """using System;

namespace Demo
{
    // A small class
    public class Greeter : Base
    {
        private int count = 0;

        public string Name { get; set; }

        public Greeter(string name)
        {
            this.Name = name;
        }

        public void Greet()
        {
            if (count > 1) { Console.WriteLine("Hi " + Name); } else count += 1;
        }
    }
}
"""


@pytest.fixture
def sample_source():
    return SAMPLE_SOURCE


@pytest.fixture
def sample_tree():
    """Parsed CompilationUnit for SAMPLE_SOURCE."""
    return parse_code(SAMPLE_SOURCE)


@pytest.fixture
def class_tree():
    return parse_code("class Foo { void Bar() {} }")
