from supremepower.detection import detect_complexity


def test_plain_message_is_simple():
    result = detect_complexity("hello")
    assert result.score == 0
    assert result.reasons == []
    assert result.is_complex is False


def test_keywords_count_one_point_each():
    result = detect_complexity("How do I secure the React API with authentication?")
    assert result.keywords == ["React", "API", "authentication"]
    assert result.reasons == ["keywords"]
    assert result.score == 3
    assert result.is_complex is True


def test_inline_code_counts_as_code_block():
    result = detect_complexity("Why does `foo()` fail?")
    assert result.reasons == ["code-blocks"]
    assert result.score == 3


def test_multiple_questions():
    result = detect_complexity("What? Why?")
    assert result.reasons == ["multiple-questions"]
    assert result.score == 2
    assert result.is_complex is False


def test_file_path():
    result = detect_complexity("see /src/app/main.py")
    assert result.reasons == ["file-paths"]
    assert result.score == 1


def test_long_message():
    result = detect_complexity(" ".join(["word"] * 51))
    assert result.reasons == ["length"]
    assert result.score == 2


def test_custom_threshold():
    assert detect_complexity("What? Why?", threshold=2).is_complex is True


def test_to_dict():
    assert detect_complexity("hello").to_dict() == {
        "is_complex": False,
        "reasons": [],
        "keywords": [],
        "score": 0,
    }
