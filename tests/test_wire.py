"""
报文编解码测试
"""
import json

import pytest

from wxpay.schemas.js import PayRequestParameters
from wxpay.schemas.native import PayPackageRequest, PayPackageResponse
from wxpay.services.wire import WireFormatError, from_json, from_xml, to_json, to_xml

APP_KEY = "testkey123"

PACKAGE_REQUEST_XML = """<xml>
<OpenId><![CDATA[oUpF8uN95-Ptaags6E-3K1yFjmzo]]></OpenId>
<AppId><![CDATA[wx2421b1c4370ec43b]]></AppId>
<IsSubscribe>1</IsSubscribe>
<ProductId><![CDATA[777111666]]></ProductId>
<TimeStamp>1369745073</TimeStamp>
<NonceStr><![CDATA[adssdasssd13d]]></NonceStr>
<AppSignature><![CDATA[d2880f4b41f35d8fb08756f60bf18931a5ac9277]]></AppSignature>
<SignMethod><![CDATA[sha1]]></SignMethod>
</xml>"""


class TestXml:

    def test_parse_package_request(self):
        req = from_xml(PayPackageRequest, PACKAGE_REQUEST_XML)
        assert req.app_id == "wx2421b1c4370ec43b"
        assert req.open_id == "oUpF8uN95-Ptaags6E-3K1yFjmzo"
        assert req.is_subscribe == 1
        assert req.time_stamp == 1369745073
        assert req.sign_method == "sha1"
        req.check_signature(APP_KEY)

    def test_parse_bytes(self):
        req = from_xml(PayPackageRequest, PACKAGE_REQUEST_XML.encode("utf-8"))
        assert req.product_id == "777111666"

    def test_missing_elements_use_defaults(self):
        req = from_xml(PayPackageRequest, "<xml><AppId>wx1</AppId><OpenId/></xml>")
        assert req.app_id == "wx1"
        assert req.open_id == ""
        assert req.is_subscribe == 0
        assert req.sign_method == "SHA1"

    def test_invalid_xml(self):
        with pytest.raises(WireFormatError):
            from_xml(PayPackageRequest, "<xml><AppId>wx1</xml>")

    def test_invalid_field_value(self):
        with pytest.raises(WireFormatError):
            from_xml(PayPackageRequest, "<xml><TimeStamp>yesterday</TimeStamp></xml>")

    def test_is_subscribe_out_of_range(self):
        with pytest.raises(WireFormatError):
            from_xml(PayPackageRequest, "<xml><IsSubscribe>2</IsSubscribe></xml>")

    def test_response_uses_wire_names(self):
        resp = PayPackageResponse(
            app_id="wx2421b1c4370ec43b",
            nonce_str="adssdasssd13d",
            time_stamp=1369745073,
            package="bank_type=WX&body=<a>",
            ret_msg="ok",
        )
        resp.set_signature(APP_KEY)
        body = to_xml(resp)
        assert body.startswith("<xml><AppId>wx2421b1c4370ec43b</AppId>")
        assert "<RetErrMsg>ok</RetErrMsg>" in body
        assert "<RetCode>0</RetCode>" in body
        assert f"<AppSignature>{resp.signature}</AppSignature>" in body
        assert "&amp;body=&lt;a&gt;" in body

        parsed = from_xml(PayPackageResponse, body)
        assert parsed.model_dump() == resp.model_dump()
        parsed.check_signature(APP_KEY)


class TestJson:

    def make_params(self):
        para = PayRequestParameters(
            app_id="wx2421b1c4370ec43b",
            nonce_str="e61463f8efa94090b1f366cccfbbb444",
            time_stamp=1395712654,
            package="prepay_id=u802345jgfjsdfgsdg888",
        )
        para.set_signature(APP_KEY)
        return para

    def test_js_bridge_field_names(self):
        data = json.loads(to_json(self.make_params()))
        assert data == {
            "appId": "wx2421b1c4370ec43b",
            "nonceStr": "e61463f8efa94090b1f366cccfbbb444",
            "timeStamp": "1395712654",
            "package": "prepay_id=u802345jgfjsdfgsdg888",
            "paySign": "B734D30A3BCABC8637C216342011612F",
            "signType": "MD5",
        }

    def test_time_stamp_accepts_string(self):
        para = from_json(PayRequestParameters, to_json(self.make_params()))
        assert para.time_stamp == 1395712654
        para.check_signature(APP_KEY)

    def test_time_stamp_accepts_int(self):
        body = json.dumps({
            "appId": "wx2421b1c4370ec43b",
            "nonceStr": "e61463f8efa94090b1f366cccfbbb444",
            "timeStamp": 1395712654,
            "package": "prepay_id=u802345jgfjsdfgsdg888",
            "paySign": "B734D30A3BCABC8637C216342011612F",
            "signType": "MD5",
        })
        from_json(PayRequestParameters, body).check_signature(APP_KEY)

    def test_python_dump_keeps_int(self):
        assert self.make_params().model_dump()["time_stamp"] == 1395712654

    def test_invalid_json(self):
        with pytest.raises(WireFormatError):
            from_json(PayRequestParameters, "{not json")

    def test_missing_required_field(self):
        with pytest.raises(WireFormatError):
            from_json(PayRequestParameters, '{"appId": "wx1"}')
