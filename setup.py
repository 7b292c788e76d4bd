from setuptools import find_packages, setup

setup(
    name="proxy_generator",
    packages=find_packages(exclude=["tests"]),
    version="0.1.0",
    description="Генератор TypeScript прокси-клиентов из описания API бэкенда",
    author="lite",
    license="MIT",
    install_requires=[
        "pydantic>=2.0.0",
        "toml>=0.10.0",
        "httpx>=0.24.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=23.0.0",
            "isort>=5.12.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "proxy-generator = proxy_generator.cli:generate",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
