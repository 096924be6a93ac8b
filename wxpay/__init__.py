"""
公众号支付签名服务

Native 支付回调与 JS API 支付参数的数据结构及签名/验签
"""
__version__ = "1.0.0"
