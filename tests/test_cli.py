import pytest

from vuereg.main import main

COMPONENT = """<template>
  <div>{{ title }}</div>
</template>

<script>
export default {
  props: {
    title: {
      type: String,
      required: true
    }
  }
};
</script>
"""


@pytest.fixture
def src_tree(tmp_path):
    src = tmp_path / "src"
    (src / "components" / "forms").mkdir(parents=True)
    (src / "Props.vue").write_text(COMPONENT)
    (src / "components" / "forms" / "Input.vue").write_text(COMPONENT)
    (src / "components" / "helpers.js").write_text("const x = 1;")
    (src / "Broken.vue").write_text("<template><div></div></template>")
    return src


def test_compile_in_place(src_tree, capsys):
    assert main([str(src_tree)]) == 0
    compiled = (src_tree / "Props.js").read_text()
    assert "window.VueComponents['Props']" in compiled
    assert "type: String" in compiled
    assert (src_tree / "components" / "forms" / "Input.js").exists()
    assert not (src_tree / "Broken.js").exists()
    assert (src_tree / "components" / "helpers.js").read_text() == "const x = 1;"
    assert "compiled: 2  skipped: 1  passed: 1  written: 2" in capsys.readouterr().out


def test_compile_into_out_dir(src_tree, tmp_path):
    out = tmp_path / "build"
    assert main([str(src_tree), "--out", str(out), "--ext", ".mjs"]) == 0
    assert (out / "Props.mjs").exists()
    assert (out / "components" / "forms" / "Input.mjs").exists()
    assert (out / "components" / "helpers.js").read_text() == "const x = 1;"
    assert (out / "Broken.vue").read_text() == "<template><div></div></template>"
    assert not (src_tree / "Props.mjs").exists()


def test_custom_registry(src_tree):
    assert main([str(src_tree), "--registry", "App.components"]) == 0
    assert "App.components['Props']" in (src_tree / "Props.js").read_text()


def test_strict_mode_fails(src_tree, capsys):
    assert main([str(src_tree), "--strict"]) == 1
    assert "ERROR:" in capsys.readouterr().err


def test_dry_run_writes_nothing(src_tree, capsys):
    assert main([str(src_tree), "--dry-run"]) == 0
    assert not (src_tree / "Props.js").exists()
    assert "would write: 2" in capsys.readouterr().out


def test_missing_source_dir(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "nope")])
    assert excinfo.value.code == 2


@pytest.mark.parametrize("ext", ["", "."])
def test_empty_extension_is_usage_error(src_tree, capsys, ext):
    with pytest.raises(SystemExit) as excinfo:
        main([str(src_tree), "--ext", ext])
    assert excinfo.value.code == 2
    assert "invalid option" in capsys.readouterr().err
