import io

from resgen.display import Display


def _display(**kw):
    return Display(out=io.StringIO(), err=io.StringIO(), **kw)


def test_status_lines():
    d = _display()
    d.header("Checking files and directories")
    d.success("Icon file ok (1024x1024)")
    d.error("Bad splash file (10x10)")
    assert d.out.getvalue() == "\nChecking files and directories\n ✔ Icon file ok (1024x1024)\n"
    assert d.err.getvalue() == " ✗ Bad splash file (10x10)\n"


def test_progress_line_is_closed_once():
    d = _display()
    d.progress("Generating icon files for ios", 1, 4, "icon-20.png")
    d.progress("Generating icon files for ios", 4, 4, "icon-40.png")
    d.progress_done()
    d.progress_done()
    out = d.out.getvalue()
    assert "[#####...............] 1/4 icon-20.png" in out
    assert "[####################] 4/4 icon-40.png" in out
    assert out.endswith("\n") and not out.endswith("\n\n")


def test_quiet_keeps_errors():
    d = _display(quiet=True)
    d.banner("resgen")
    d.success("y")
    d.progress("s", 1, 2, "n")
    d.error("boom")
    assert d.out.getvalue() == ""
    assert d.err.getvalue() == " ✗ boom\n"
