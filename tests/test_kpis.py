from pizza_sales import config, run_demo
from pizza_sales.kpis import build_figures, run_kpis
from pizza_sales.logger import LOGGER_NAME, setup_logger
from pizza_sales.report_text import TITLES, render_report, render_table
from pizza_sales.reports import REPORTS, run_all


def test_every_report_has_a_title():
    assert set(TITLES) == set(REPORTS)


def test_render_report(small_dataset):
    text = render_report(run_all(small_dataset))
    assert "== Basics ==" in text
    assert "-- Cumulative revenue by month" in text
    assert "161.5" in text


def test_render_table_truncates(small_dataset):
    text = render_table(small_dataset.order_details, max_rows=3)
    assert text.endswith("... 5 more row(s)")


def test_render_empty_table(empty_dataset):
    assert render_table(empty_dataset.orders) == "(no rows)"


def test_build_figures(small_dataset):
    figs = build_figures(run_all(small_dataset))
    assert set(figs) == {
        "kpi_orders_by_hour", "kpi_top_quantity", "kpi_quantity_by_category", "kpi_cumulative_revenue",
    }


def test_run_kpis_saves_figures(table_dir, small_dataset, capsys):
    results = run_kpis(small_dataset)
    assert set(results) == set(REPORTS)
    assert (config.FIG_DIR / "kpi_orders_by_hour.png").exists()
    assert "Figures saved to:" in capsys.readouterr().out


def test_run_kpis_without_orders(table_dir, empty_dataset, capsys):
    assert run_kpis(empty_dataset) == {}
    assert "No orders" in capsys.readouterr().out


def test_run_demo_falls_back_to_synthetic_data(table_dir, tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(config, "RAW_DIR", tmp_path / "missing")
    run_demo.main()
    out = capsys.readouterr().out
    assert "Orders loaded: 2000" in out
    assert (table_dir / "order_details.csv").exists()


def test_setup_logger_is_idempotent():
    logger = setup_logger("DEBUG")
    n = len(logger.handlers)
    assert setup_logger("DEBUG") is logger
    assert len(logger.handlers) == n
    assert logger.name == LOGGER_NAME
