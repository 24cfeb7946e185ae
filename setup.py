from setuptools import setup, find_packages
import os

exec(open(os.path.join(os.path.abspath(os.path.dirname(__file__)), 'buildver', '_version.py')).read())

with open(os.path.join(os.path.abspath(os.path.dirname(__file__)), 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

name = 'buildver'

setup(
    name=name,
    version=__version__,
    description='Parse, validate and report v<major>.<minor>.<patch> build versions',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3 :: Only',
    ],
    keywords='semver version',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[],
    extras_require={'test': ['pytest']},
)
