"""
序列号条码标签生成器 - 核心模块

模块结构：
- config/     运行期配置（纸张几何/条码/输出/日志）
- models/     数据模型定义
- barcode/    条码编码、栅格化与解码（Code 128）
- layout/     标签网格布局与分页游标
- doc_gen/    文档组装与PDF序列化
- pipeline/   序列号生成与整体生成流程
- cli.py      命令行入口
"""

__version__ = "0.1.0"
