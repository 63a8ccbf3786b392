import scripts.build_site as build_site


def test_build_site_main_writes_output(tmp_path, data_dir, capsys):
    """build_site.main() generates pages and sitemap under --root."""
    code = build_site.main(["--root", str(tmp_path), "--data-dir", str(data_dir)])
    assert code == 0
    assert (tmp_path / "sitemap.xml").is_file()
    assert (tmp_path / "locations" / "mueller.html").is_file()
    assert "✓ Wrote 3 location page(s)" in capsys.readouterr().out


def test_build_site_honours_environment(tmp_path, data_dir, monkeypatch):
    monkeypatch.setenv("CAFELATTE_SITE_ROOT", str(tmp_path))
    monkeypatch.setenv("CAFELATTE_DATA_DIR", str(data_dir))
    monkeypatch.setenv("CAFELATTE_SITE_ORIGIN", "https://cafe.example")
    assert build_site.main([]) == 0
    sitemap = (tmp_path / "sitemap.xml").read_text(encoding="utf-8")
    assert "<loc>https://cafe.example/about/</loc>" in sitemap
