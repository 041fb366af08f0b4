"""
카탈로그 내보내기
카테고리별로 그룹된 상품을 JSON / CSV / XML 파일로 저장
"""
import json
import logging
import xml.dom.minidom as minidom
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Type

from product_catalog.exceptions import ExportError
from product_catalog.models.product import EnrichedProduct, GroupedCatalog

logger = logging.getLogger(__name__)

DEFAULT_BASENAME = "grouped_products"

CSV_HEADER = (
    "Category,ID,Title,Original Price,Discounted Price,Stock Availability,Popularity Score"
)


def _text(value: object) -> str:
    """None은 빈 문자열로"""
    return "" if value is None else str(value)


class BaseExporter(ABC):
    """내보내기 베이스 클래스"""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """형식 이름 (json, csv, xml)"""
        pass

    @abstractmethod
    def render(self, grouped: GroupedCatalog) -> str:
        """파일 내용 생성"""
        pass

    def write(
        self,
        grouped: GroupedCatalog,
        output_dir: Path = Path("."),
        basename: str = DEFAULT_BASENAME,
    ) -> Path:
        """파일 저장 (기존 파일 덮어씀)"""
        content = self.render(grouped)
        path = Path(output_dir) / f"{basename}.{self.format_name}"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

        logger.info(f"[Exporter] {self.format_name} 저장: {path} ({len(grouped)}개 카테고리)")
        print(f"{self.format_name.upper()} file saved as {path.name}")
        return path


class JsonExporter(BaseExporter):
    """들여쓰기된 JSON (카테고리 -> 상품 배열)"""

    format_name = "json"

    def render(self, grouped: GroupedCatalog) -> str:
        data = {
            category: [product.model_dump() for product in products]
            for category, products in grouped.items()
        }
        return json.dumps(data, indent=2, ensure_ascii=False)


class CsvExporter(BaseExporter):
    """
    CSV (카테고리 순서 -> 카테고리 내 정렬 순서)

    값은 콤마로만 이어 붙이며 따옴표 처리를 하지 않습니다.
    제목에 콤마가 있으면 열이 밀립니다.
    """

    format_name = "csv"

    @staticmethod
    def _row(category: str, product: EnrichedProduct) -> str:
        fields = [
            category,
            product.id,
            product.title,
            product.original_price,
            product.discounted_price,
            product.stock_availability,
            product.popularity_score,
        ]
        return ",".join(_text(f) for f in fields)

    def render(self, grouped: GroupedCatalog) -> str:
        lines = [CSV_HEADER]
        for category, products in grouped.items():
            lines.extend(self._row(category, p) for p in products)
        return "\n".join(lines) + "\n"


class XmlExporter(BaseExporter):
    """XML (<Products> / <Category Name> / <Product>)"""

    format_name = "xml"

    def build_tree(self, grouped: GroupedCatalog) -> ET.Element:
        root = ET.Element("Products")
        for category, products in grouped.items():
            category_node = ET.SubElement(root, "Category", Name=category)
            for product in products:
                node = ET.SubElement(category_node, "Product")
                ET.SubElement(node, "ID").text = _text(product.id)
                ET.SubElement(node, "Title").text = product.title
                ET.SubElement(node, "OriginalPrice").text = _text(product.original_price)
                ET.SubElement(node, "DiscountedPrice").text = _text(product.discounted_price)
                ET.SubElement(node, "StockAvailability").text = _text(product.stock_availability)
                ET.SubElement(node, "PopularityScore").text = _text(product.popularity_score)
        return root

    def render(self, grouped: GroupedCatalog) -> str:
        rough = ET.tostring(self.build_tree(grouped), encoding="utf-8")
        return minidom.parseString(rough).toprettyxml(indent="  ", encoding="utf-8").decode("utf-8")


EXPORTERS: Dict[str, Type[BaseExporter]] = {
    "json": JsonExporter,
    "csv": CsvExporter,
    "xml": XmlExporter,
}


def get_exporter(output_format: str) -> BaseExporter:
    """형식 이름으로 내보내기 객체 반환"""
    exporter_cls = EXPORTERS.get(output_format)
    if exporter_cls is None:
        raise ExportError(output_format)
    return exporter_cls()


def export_catalog(
    grouped: GroupedCatalog,
    output_format: str,
    output_dir: Optional[Path] = None,
    basename: str = DEFAULT_BASENAME,
) -> Path:
    """
    그룹된 카탈로그를 지정 형식으로 저장

    Raises:
        ExportError: 지원하지 않는 형식 (파일은 만들지 않음)
    """
    exporter = get_exporter(output_format)
    return exporter.write(grouped, Path(output_dir or "."), basename)
