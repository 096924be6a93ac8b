"""
报文编解码模块

Native 支付回调使用 <xml>...</xml> 格式, JS API 支付参数使用 JSON.
字段名使用各模型上定义的 alias (平台报文里的名字).
"""
import json
import xml.etree.ElementTree as ET
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class WireFormatError(ValueError):
    """报文格式错误"""


def from_xml(model: Type[ModelT], body: bytes | str) -> ModelT:
    """
    解析平台推送的 xml 报文

    缺失或为空的元素使用模型默认值
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise WireFormatError(f"xml 解析失败: {str(e)}") from e

    data = {}
    for child in root:
        if child.text is None:
            continue
        data[child.tag] = child.text

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise WireFormatError(f"xml 字段不正确: {str(e)}") from e


def to_xml(record: BaseModel) -> str:
    """编码为 <xml>...</xml> 报文"""
    root = ET.Element("xml")
    for name, value in record.model_dump(by_alias=True, mode="json").items():
        ET.SubElement(root, name).text = "" if value is None else str(value)
    return ET.tostring(root, encoding="unicode")


def from_json(model: Type[ModelT], body: bytes | str) -> ModelT:
    """解析 JSON 报文"""
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise WireFormatError(f"json 字段不正确: {str(e)}") from e


def to_json(record: BaseModel) -> str:
    """编码为前端使用的 JSON 字符串"""
    return json.dumps(record.model_dump(by_alias=True, mode="json"), ensure_ascii=False)
