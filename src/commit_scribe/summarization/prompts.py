"""Prompt templates for commit message generation."""

from commit_scribe.config.settings import CommitConfig
from commit_scribe.core.errors import ConfigurationError
from commit_scribe.core.types import PromptModule, Role
from commit_scribe.i18n import get_translation

TITLE_MAX_CHARS = 72

IDENTITY = "You are to act as the author of a commit message in git."

EXAMPLE_DIFF = """diff --git a/src/server.ts b/src/server.ts
index ad4db42..f3b18a9 100644
--- a/src/server.ts
+++ b/src/server.ts
@@ -10,7 +10,7 @@ import {
 initWinstonLogger();

 const app = express();
-const port = 7799;
+const PORT = 7799;

 app.use(express.json());

@@ -34,6 +34,6 @@ app.use((_, res, next) => {
 // ROUTES
 app.use(PROTECTED_ROUTER_URL, protectedRouter);

-app.listen(port, () => {
-  console.log(`Server listening on port ${port}`);
+app.listen(process.env.PORT || PORT, () => {
+  console.log(`Server listening on port ${PORT}`);
 });"""


class CommitPrompts:
    """Collection of prompts for generating commit messages."""

    MAIN_SYSTEM = """{identity} Your mission is to create a clean and comprehensive commit message as per the conventional commit convention and explain WHAT were the changes and mainly WHY the changes were done.
I'll send you an output of 'git diff --staged' command, and you are to convert it into a commit message.
Only produce a single commit message for all files combined.
{emoji_rule}
{description_rule}
{issue_rule}
Use the present tense. Lines must not be longer than {max_chars} characters. Use {language} for the commit message."""

    REDUCE_SYSTEM = "{identity} Your mission is to summarise multiple commit messages into a single commit message."

    REDUCE_USER = """Summarise the following commit messages into a single commit message title ensuring the title format stays the same.
{emoji_rule}
{description_rule}
{issue_rule}
The summarised commit message title needs to be less than {max_chars} characters. Where there are multiple types (eg. fix, feat), this should be combined into the single most relevant type.
You should only output ONE commit message:
{messages}"""

    @staticmethod
    def _emoji_rule(config: CommitConfig, subject: str = "commit") -> str:
        if config.emoji:
            return f"Use GitMoji convention to preface the {subject}."
        return "Do not preface the commit with anything."

    @staticmethod
    def _description_rule(config: CommitConfig) -> str:
        if config.description:
            return (
                "Add a short description of WHY the changes are done after the single "
                "commit message title. Don't start it with \"This commit\", just describe "
                "the changes."
            )
        return "Your response should just be one line with a commit message title and no description."

    @staticmethod
    def _issue_rule(config: CommitConfig, issue_id: str) -> str:
        if config.issue_enabled:
            return f"You must also include the Issue ID: {issue_id} in the commit message title."
        return "Don't include an Issue ID in the commit message title."

    @classmethod
    def get_main_messages(cls, config: CommitConfig, issue_id: str = "") -> list[dict[str, str]]:
        """Build the fixed messages that precede every diff.

        Raises:
            ConfigurationError: If the prompt module is not supported.
        """
        if config.prompt_module != PromptModule.CONVENTIONAL_COMMIT:
            raise ConfigurationError(f"Unsupported prompt module: {config.prompt_module}")

        translation = get_translation(config.language)
        system = cls.MAIN_SYSTEM.format(
            identity=IDENTITY,
            emoji_rule=cls._emoji_rule(config),
            description_rule=cls._description_rule(config),
            issue_rule=cls._issue_rule(config, config.format_issue_id(issue_id)),
            max_chars=TITLE_MAX_CHARS,
            language=translation.local_language,
        )

        example = f"{'🐛 ' if config.emoji else ''}{translation.commit_feat}"
        if config.description:
            example = f"{example}\n{translation.commit_description}"

        return [
            {"role": Role.SYSTEM.value, "content": system},
            {"role": Role.USER.value, "content": EXAMPLE_DIFF},
            {"role": Role.ASSISTANT.value, "content": example},
        ]

    @classmethod
    def get_diff_messages(
        cls,
        config: CommitConfig,
        diff: str,
        issue_id: str = "",
    ) -> list[dict[str, str]]:
        messages = cls.get_main_messages(config, issue_id)
        messages.append({"role": Role.USER.value, "content": diff})
        return messages

    @classmethod
    def get_reduce_messages(cls, config: CommitConfig, joined: str) -> list[dict[str, str]]:
        if config.description:
            description_rule = (
                "Summarise the descriptions from the multiple messages into a single short "
                "description of WHY the changes are done after the commit message. Don't "
                "start it with \"This commit\", just describe the changes."
            )
        else:
            description_rule = (
                "The summarised commit message should just be one line with a commit "
                "message title and no description."
            )
        if config.issue_enabled:
            issue_rule = "You must also keep the Issue ID in the summarised commit message title."
        else:
            issue_rule = "Don't include an Issue ID in the summarised commit message title."

        user = cls.REDUCE_USER.format(
            emoji_rule=cls._emoji_rule(config, subject="summarised commit"),
            description_rule=description_rule,
            issue_rule=issue_rule,
            max_chars=TITLE_MAX_CHARS,
            messages=joined,
        )
        return [
            {"role": Role.SYSTEM.value, "content": cls.REDUCE_SYSTEM.format(identity=IDENTITY)},
            {"role": Role.USER.value, "content": user},
        ]
