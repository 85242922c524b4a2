from flashmsg.flash import HtmlSanitizer


def test_keeps_wrapper_markup_and_classes() -> None:
    clean = HtmlSanitizer()
    assert clean("<div class='alert alert-info'>Hi</div>\n") == (
        '<div class="alert alert-info">Hi</div>\n'
    )


def test_keeps_close_button() -> None:
    out = HtmlSanitizer()(
        '<button type="button" class="btn-close" data-bs-dismiss="alert">x</button>'
    )
    assert out.startswith("<button")
    assert 'data-bs-dismiss="alert"' in out
    assert 'class="btn-close"' in out


def test_strips_scripts_and_handlers() -> None:
    out = HtmlSanitizer()("<div onclick='steal()'>ok</div><script>alert(1)</script>")
    assert out == "<div>ok</div>"


def test_extra_tags_and_attributes() -> None:
    clean = HtmlSanitizer(extra_tags={"section"}, extra_attributes={"section": {"hidden"}})
    assert "<section" in clean("<section hidden>x</section>")


def test_empty_input() -> None:
    assert HtmlSanitizer()("") == ""
