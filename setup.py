"""
pdfscan - CID/Shift-JIS PDF Text Scanner
pip install -e . 또는 python setup.py install
"""

from setuptools import setup, find_packages
from pathlib import Path

readme = Path(__file__).parent / "README.md"
long_description = readme.read_text(encoding='utf-8') if readme.exists() else ""

setup(
    name="pdfscan",
    version="0.1.0",
    description="Heuristic PDF text scanner - ToUnicode CMap / Shift-JIS 폰트 PDF에서 순수 Python으로 텍스트 추출",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",

    packages=find_packages(include=['pdfscan', 'pdfscan.*']),

    python_requires=">=3.8",
    install_requires=[],

    extras_require={
        'dev': ['pytest>=7.0', 'pytest-cov>=4.0'],
    },

    entry_points={
        'console_scripts': [
            'pdfscan=pdfscan.__main__:main',
        ],
    },

    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Text Processing",
    ],

    keywords="pdf cmap tounicode shift-jis text extraction lightweight",
)
