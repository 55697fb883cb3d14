"""Tests for WebGrid configuration and binding."""

import unittest
from dataclasses import dataclass
from types import SimpleNamespace

from webgrid.data_source import PreComputedDataSource, WebGridDataSource
from webgrid.grid import WebGrid
from webgrid.sort_info import SortDirection, SortInfo


@dataclass
class Product:
    name: str
    price: float


class Legacy:
    def __init__(self, code, qty):
        self.code = code
        self.qty = qty


def _products(count=25):
    return [Product(f"p{i:02d}", float(i)) for i in range(count)]


class TestConfiguration(unittest.TestCase):

    def test_rows_per_page_must_be_positive_when_paging(self):
        with self.assertRaises(ValueError):
            WebGrid(_products(), rows_per_page=0)

    def test_rows_per_page_ignored_without_paging(self):
        grid = WebGrid(_products(), rows_per_page=0, can_page=False)
        self.assertEqual(len(grid.get_rows()), 25)

    def test_default_sort_from_string(self):
        grid = WebGrid(default_sort="price")
        self.assertEqual(grid.default_sort, SortInfo("price", SortDirection.ASCENDING))

    def test_default_sort_from_sort_info(self):
        default = SortInfo("price", SortDirection.DESCENDING)
        self.assertIs(WebGrid(default_sort=default).default_sort, default)

    def test_configuration_is_read_only(self):
        grid = WebGrid(_products(), rows_per_page=5)
        for name, value in (
            ("rows_per_page", 10),
            ("can_page", False),
            ("can_sort", False),
            ("default_sort", SortInfo("price")),
        ):
            with self.assertRaises(AttributeError):
                setattr(grid, name, value)
        self.assertEqual(len(grid.get_rows()), 5)
        self.assertEqual(grid.page_count, 5)

    def test_add_sorter_returns_grid(self):
        grid = WebGrid()
        self.assertIs(grid.add_sorter("name", len), grid)
        self.assertIn("name", grid.custom_sorters)

    def test_custom_sorters_are_read_only(self):
        grid = WebGrid().add_sorter("name", len)
        with self.assertRaises(TypeError):
            grid.custom_sorters["other"] = len

    def test_add_sorter_validates_arguments(self):
        with self.assertRaises(ValueError):
            WebGrid().add_sorter("", len)
        with self.assertRaises(TypeError):
            WebGrid().add_sorter("name", "not callable")


class TestBinding(unittest.TestCase):

    def test_auto_sort_and_page_uses_web_grid_data_source(self):
        grid = WebGrid(_products())
        self.assertIsInstance(grid._data_source, WebGridDataSource)

    def test_pre_computed_rows(self):
        page = _products()[10:20]
        grid = WebGrid(rows_per_page=10).bind(page, auto_sort_and_page=False, row_count=25)
        self.assertIsInstance(grid._data_source, PreComputedDataSource)
        self.assertEqual(grid.total_row_count, 25)
        self.assertEqual(grid.page_count, 3)
        self.assertEqual([row.value.name for row in grid.get_rows(SortInfo("price"), 1)][:2], ["p10", "p11"])

    def test_pre_computed_requires_row_count(self):
        with self.assertRaises(ValueError):
            WebGrid().bind(_products(), auto_sort_and_page=False)

    def test_bind_twice_fails(self):
        grid = WebGrid(_products())
        with self.assertRaises(RuntimeError):
            grid.bind(_products())

    def test_unbound_grid_has_no_rows(self):
        with self.assertRaises(RuntimeError):
            WebGrid().get_rows()

    def test_one_shot_iterators_are_rejected(self):
        with self.assertRaises(TypeError):
            WebGrid(iter(_products()))

    def test_element_type_inferred_from_first_record(self):
        self.assertIs(WebGrid(_products()).element_type, Product)

    def test_explicit_element_type(self):
        self.assertIs(WebGrid([], element_type=Product).element_type, Product)

    def test_empty_source(self):
        grid = WebGrid([], default_sort="price")
        self.assertEqual(grid.get_rows(SortInfo("name"), 0), [])
        self.assertEqual(grid.total_row_count, 0)
        self.assertEqual(grid.page_count, 0)


class TestQueries(unittest.TestCase):

    def test_page_count(self):
        self.assertEqual(WebGrid(_products(25), rows_per_page=10).page_count, 3)
        self.assertEqual(WebGrid(_products(20), rows_per_page=10).page_count, 2)

    def test_page_count_without_paging(self):
        self.assertEqual(WebGrid(_products(25), can_page=False).page_count, 1)

    def test_column_names_for_dataclass(self):
        self.assertEqual(WebGrid(_products()).column_names, ["name", "price"])

    def test_column_names_for_dicts(self):
        grid = WebGrid([{"id": 1, "title": "x"}])
        self.assertEqual(grid.column_names, ["id", "title"])

    def test_column_names_for_namespace(self):
        grid = WebGrid([SimpleNamespace(id=1, title="x")])
        self.assertEqual(grid.column_names, ["id", "title"])

    def test_column_names_for_plain_objects(self):
        self.assertEqual(WebGrid([Legacy("a", 1)]).column_names, ["code", "qty"])

    def test_sort_plain_objects_by_instance_attribute(self):
        grid = WebGrid([Legacy("b", 2), Legacy("a", 3), Legacy("c", 1)], can_page=False)
        rows = grid.get_rows(SortInfo("qty"), 0)
        self.assertEqual([row.value.code for row in rows], ["c", "b", "a"])

    def test_row_field_access(self):
        row = WebGrid(_products()).get_rows(SortInfo("price", SortDirection.DESCENDING))[0]
        self.assertEqual(row["name"], "p24")
        self.assertEqual(row.get("missing", "n/a"), "n/a")
        with self.assertRaises(KeyError):
            row["missing"]


if __name__ == "__main__":
    unittest.main()
