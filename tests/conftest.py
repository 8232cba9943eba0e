"""Shared sample documents for unit and integration tests"""

import pytest


SAMPLE_BODY = """\

# Ruby attribute libraries

Some prose about structs.

```ruby
Point = Struct.new(:x, :y)
```

## Dry::Struct

    indented = true

End.
"""

SAMPLE_POST = """\
---
title: Comparing attribute libraries
date: 2019-05-12
tags: ruby, structs
commit: 3f2a9c1
---
""" + SAMPLE_BODY


@pytest.fixture(name="sample_post")
def sample_post_fixture():
    return SAMPLE_POST


@pytest.fixture(name="sample_body")
def sample_body_fixture():
    return SAMPLE_BODY


@pytest.fixture(name="post_file")
def post_file_fixture(tmp_path):
    f = tmp_path / "attribute-libraries.md"
    f.write_text(SAMPLE_POST, encoding="utf-8")
    return f
