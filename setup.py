from setuptools import find_packages, setup


with open('requirements.txt', encoding='utf-8') as requirements_file:
    requirements = [line.strip() for line in requirements_file if line.strip() and not line.startswith('#')]


setup(
    name='github_issues_to_notion',
    version='0.1.0',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    install_requires=requirements,
    extras_require={'test': ['pytest', 'responses']},
    python_requires='>=3.9',
    description='Add newly opened GitHub issues to a Notion database',
)
