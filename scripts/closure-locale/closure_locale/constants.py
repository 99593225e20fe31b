"""Built-in locale list, alias table and file conventions."""

from __future__ import annotations

OUTPUT_NAME = "closure-locale.ts"
DATA_FILE_EXTENSION = ".ts"
EXPORT_PREFIX = "export default "
REGISTER_IMPORT = "import {registerLocaleData} from '../src/i18n/locale_data';"

HEADER = """/**
 * @license
 * Copyright Google Inc. All Rights Reserved.
 *
 * Use of this source code is governed by an MIT-style license that can be
 * found in the LICENSE file at https://angular.io/license
 */

// THIS CODE IS GENERATED - DO NOT MODIFY
// See angular/tools/gulp-tasks/cldr/extract.js
"""

# Upper bound on alias hops followed from a single requested locale.
MAX_ALIAS_HOPS = 8

# Locales known to Closure, from closure/goog/i18n/datetimepatterns.js.
# fmt: off
GOOG_LOCALES: tuple[str, ...] = (
    "af", "am", "ar", "ar-DZ", "az", "be", "bg", "bn", "br", "bs",
    "ca", "chr", "cs", "cy", "da", "de", "de-AT", "de-CH", "el", "en-AU",
    "en-CA", "en-GB", "en-IE", "en-IN", "en-SG", "en-ZA", "es", "es-419", "es-MX", "es-US",
    "et", "eu", "fa", "fi", "fr", "fr-CA", "ga", "gl", "gsw", "gu",
    "haw", "hi", "hr", "hu", "hy", "in", "is", "it", "iw", "ja",
    "ka", "kk", "km", "kn", "ko", "ky", "ln", "lo", "lt", "lv",
    "mk", "ml", "mn", "mo", "mr", "ms", "mt", "my", "ne", "nl",
    "no", "or", "pa", "pl", "pt", "pt-PT", "ro", "ru", "sh", "si",
    "sk", "sl", "sq", "sr", "sv", "sw", "ta", "te", "th", "tl",
    "tr", "uk", "ur", "uz", "vi", "zh", "zh-CN", "zh-HK", "zh-TW", "zu",
)
# fmt: on

# Deprecated ids used by Closure -> current ids.
# Extracted by hand from cldr-core/supplemental/aliases.json.
ALIASES: dict[str, str] = {
    "in": "id",
    "iw": "he",
    "mo": "ro-MD",
    "no": "nb",
    "nb": "no-NO",
    "sh": "sr-Latn",
    "tl": "fil",
    "pt": "pt-BR",
    "zh-CN": "zh-Hans-CN",
    "zh-Hans-CN": "zh-Hans",
    "zh-HK": "zh-Hant-HK",
    "zh-Hant-HK": "zh-Hant",
    "zh-TW": "zh-Hant-TW",
    "zh-Hant-TW": "zh-Hant",
}
