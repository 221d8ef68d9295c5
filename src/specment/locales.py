"""Display languages and the localized message catalog.

The active language is always passed explicitly; nothing here holds
per-run state.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Language(str, Enum):
    """Display languages offered at startup."""

    EN = "en"
    JA = "ja"

    @property
    def label(self) -> str:
        return LANGUAGE_LABELS[self]


LANGUAGE_LABELS = {
    Language.EN: "English",
    Language.JA: "日本語",
}

DEFAULT_LANGUAGE = Language.EN


MESSAGES = {
    "language_prompt": {
        Language.EN: "Please select display language / 表示言語を選択してください",
        Language.JA: "Please select display language / 表示言語を選択してください",
    },
    "welcome_title": {
        Language.EN: "🚀 Welcome to create-specment!",
        Language.JA: "🚀 create-specmentへようこそ！",
    },
    "welcome_body": {
        Language.EN: "Creating a new Docusaurus-based specification documentation project...",
        Language.JA: "Docusaurusベースの仕様書ドキュメントプロジェクトを作成します...",
    },
    "project_name_prompt": {
        Language.EN: "Enter folder name (project name)",
        Language.JA: "作成先のフォルダー名(プロジェクト名)を入力してください",
    },
    "project_name_required": {
        Language.EN: "Folder name is required",
        Language.JA: "フォルダー名が必要です",
    },
    "project_name_chars": {
        Language.EN: "Only alphanumeric characters, hyphens, and underscores are allowed",
        Language.JA: "英数字、ハイフン、アンダースコアのみ使用可能です",
    },
    "invalid_project_name": {
        Language.EN: (
            "Invalid project name: {value}. Only alphanumeric characters, "
            "hyphens, and underscores are allowed"
        ),
        Language.JA: "無効なプロジェクト名です: {value}。英数字、ハイフン、アンダースコアのみ使用可能です",
    },
    "template_prompt": {
        Language.EN: "Which templates would you like to use? (comma-separated numbers or names)",
        Language.JA: "どのテンプレートを使用しますか？（カンマ区切りで複数選択可）",
    },
    "template_not_found": {
        Language.EN: 'Template "{value}" not found',
        Language.JA: 'テンプレート "{value}" が見つかりません',
    },
    "no_templates_available": {
        Language.EN: "No templates available",
        Language.JA: "利用可能なテンプレートがありません",
    },
    "no_templates_selected": {
        Language.EN: "No templates selected",
        Language.JA: "テンプレートが選択されていません",
    },
    "supported_features": {
        Language.EN: "Features supported by selected templates",
        Language.JA: "選択したテンプレートがサポートする機能",
    },
    "feature_prompt": {
        Language.EN: "Which additional features would you like to include? (comma-separated, empty for none)",
        Language.JA: "どの追加機能を含めますか？（カンマ区切り、空欄でなし）",
    },
    "recommended": {
        Language.EN: "recommended",
        Language.JA: "推奨",
    },
    "unknown_feature": {
        Language.EN: 'Feature "{value}" is not available for the selected templates',
        Language.JA: '機能 "{value}" は選択したテンプレートでは利用できません',
    },
    "invalid_choice": {
        Language.EN: "Invalid choice: {value}",
        Language.JA: "無効な選択です: {value}",
    },
    "choice_required": {
        Language.EN: "Select at least one option",
        Language.JA: "少なくとも1つ選択してください",
    },
    "directory_exists": {
        Language.EN: 'Directory "{value}" already exists',
        Language.JA: 'ディレクトリ "{value}" は既に存在します',
    },
    "directory_missing": {
        Language.EN: "Project directory does not exist: {value}",
        Language.JA: "プロジェクトディレクトリが存在しません: {value}",
    },
    "directory_not_writable": {
        Language.EN: "No write permission for directory: {value}",
        Language.JA: "ディレクトリへの書き込み権限がありません: {value}",
    },
    "path_is_directory": {
        Language.EN: "Cannot write file, a directory exists at: {value}",
        Language.JA: "ファイルを書き込めません。同名のディレクトリがあります: {value}",
    },
    "step_structure": {
        Language.EN: "Creating project structure...",
        Language.JA: "プロジェクト構造を作成中...",
    },
    "step_content": {
        Language.EN: "Copying template files...",
        Language.JA: "テンプレートファイルをコピー中...",
    },
    "step_config": {
        Language.EN: "Generating configuration files...",
        Language.JA: "設定ファイルを生成中...",
    },
    "install_start": {
        Language.EN: "Installing dependencies with {value}...",
        Language.JA: "{value} で依存関係をインストール中...",
    },
    "install_hint": {
        Language.EN: "This may take a few minutes depending on your internet connection.",
        Language.JA: "インターネット接続によっては数分かかる場合があります。",
    },
    "install_done": {
        Language.EN: "Dependencies installed",
        Language.JA: "依存関係をインストールしました",
    },
    "install_failed": {
        Language.EN: "Dependency installation failed. The project was created; please install dependencies manually:",
        Language.JA: "プロジェクトは作成されましたが、依存関係のインストールに失敗しました。手動でインストールしてください:",
    },
    "install_skipped": {
        Language.EN: "Dependency installation was skipped. You can install dependencies manually by running:",
        Language.JA: "依存関係のインストールがスキップされました。以下のコマンドで手動でインストールできます:",
    },
    "completion_title": {
        Language.EN: "🎉 Project created successfully!",
        Language.JA: "🎉 プロジェクトが正常に作成されました！",
    },
    "next_steps": {
        Language.EN: "Next steps:",
        Language.JA: "次のステップ:",
    },
    "next_install": {
        Language.EN: "Install dependencies",
        Language.JA: "依存関係をインストール",
    },
    "next_start": {
        Language.EN: "Start development server",
        Language.JA: "開発サーバーを起動",
    },
    "next_build": {
        Language.EN: "Build for production",
        Language.JA: "本番用ビルド",
    },
    "happy": {
        Language.EN: "📚 Happy documenting!",
        Language.JA: "📚 楽しいドキュメント作成を！",
    },
    "error": {
        Language.EN: "Error",
        Language.JA: "エラー",
    },
    "integrate_title": {
        Language.EN: "Integrating specment into {value}",
        Language.JA: "{value} に specment を統合します",
    },
    "integrate_done": {
        Language.EN: "Integration complete",
        Language.JA: "統合が完了しました",
    },
    "conflicts_title": {
        Language.EN: "Configuration conflicts",
        Language.JA: "設定の競合",
    },
    "warnings_title": {
        Language.EN: "Warnings",
        Language.JA: "警告",
    },
}


def translate(language: Language, key: str, **kwargs) -> str:
    """Look up a message for the given language and format it."""
    entry = MESSAGES.get(key)
    if entry is None:
        logger.warning("Missing message key: %s", key)
        return key
    text = entry.get(Language(language), entry[DEFAULT_LANGUAGE])
    return text.format(**kwargs) if kwargs else text
