"""
Unit Tests - Report Export
"""
import json

import polars as pl
import pytest

from seller_analytics.analysis import analyze_sales_data
from seller_analytics.export import ReportFormat, ReportWriter, reports_to_frame, top_products_frame


@pytest.fixture
def reports(sample_bundle, default_strategy):
    return analyze_sales_data(sample_bundle, default_strategy)


class TestFrames:
    """Tests for DataFrame conversion"""
    
    def test_reports_to_frame(self, reports):
        """Test one row per seller in ranked order"""
        df = reports_to_frame(reports)
        
        assert df.height == 3
        assert df.columns == ["seller_id", "name", "revenue", "profit", "sales_count", "top_products", "bonus"]
        assert df["seller_id"].to_list() == ["S2", "S1", "S3"]
        assert df["top_products"][0].to_list() == [{"sku": "P3", "quantity": 4}, {"sku": "P2", "quantity": 3}]
    
    def test_top_products_frame(self, reports):
        """Test long format with 1-based rank"""
        df = top_products_frame(reports)
        
        assert df.height == 3
        first = df.filter(pl.col("seller_id") == "S2").sort("rank")
        assert first["sku"].to_list() == ["P3", "P2"]
        assert first["rank"].to_list() == [1, 2]
    
    def test_empty(self):
        """Test no reports gives typed empty frames"""
        assert reports_to_frame([]).height == 0
        assert top_products_frame([]).height == 0


class TestReportWriter:
    """Tests for ReportWriter"""
    
    def test_write_json(self, reports, tmp_path):
        """Test JSON keeps the report shape"""
        path = ReportWriter(str(tmp_path)).write(reports, tmp_path / "report.json", ReportFormat.JSON)
        
        payload = json.loads(path.read_text(encoding="utf-8"))
        assert payload[1] == {
            "seller_id": "S1",
            "name": "Alice Smith",
            "revenue": 90.0,
            "profit": 80.0,
            "sales_count": 1,
            "top_products": [{"sku": "P1", "quantity": 2}],
            "bonus": 8.0,
        }
    
    def test_write_csv(self, reports, tmp_path):
        """Test CSV stores top_products as JSON text"""
        path = ReportWriter(str(tmp_path)).write(reports, tmp_path / "report.csv", "csv")
        
        df = pl.read_csv(path)
        assert df.height == 3
        assert df["bonus"].to_list() == [12.6, 8.0, 0.0]
        assert json.loads(df["top_products"][0]) == [{"sku": "P3", "quantity": 4}, {"sku": "P2", "quantity": 3}]
    
    def test_write_parquet(self, reports, tmp_path):
        """Test Parquet round trip keeps nested column"""
        path = ReportWriter(str(tmp_path)).write(reports, tmp_path / "report.parquet", ReportFormat.PARQUET)
        
        df = pl.read_parquet(path)
        assert df.equals(reports_to_frame(reports))
    
    def test_default_path(self, reports, tmp_path):
        """Test timestamped file in output dir"""
        path = ReportWriter(str(tmp_path / "out")).write(reports)
        
        assert path.parent == tmp_path / "out"
        assert path.name.startswith("seller_report_")
        assert path.suffix == ".json"
    
    def test_unknown_format(self, reports, tmp_path):
        """Test unsupported format"""
        with pytest.raises(ValueError):
            ReportWriter(str(tmp_path)).write(reports, tmp_path / "report.xml", "xml")
