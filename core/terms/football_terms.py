"""Static football vocabularies.

Source-side tables map an English (or original-language) form to the conventional
Simplified Chinese rendering. Target-side tables list Chinese words that indicate a
translation kept its football register.
"""

from __future__ import annotations

from typing import Final

__all__: list[str] = [
    "CANONICAL_ENTITY_NAMES",
    "COMPETITIONS",
    "FAILURE_MARKERS",
    "GENERAL_TERMS",
    "PLAYERS",
    "PROMPT_GLOSSARY",
    "PROMPT_LEAGUE_GLOSSARY",
    "TARGET_DOMAIN_TERMS",
    "TEAMS",
    "WARMUP_TERMS",
]

GENERAL_TERMS: Final[tuple[tuple[str, str], ...]] = (
    # Basics
    ("football", "足球"),
    ("soccer", "足球"),
    ("goal", "进球"),
    ("assist", "助攻"),
    ("penalty", "点球"),
    ("free kick", "任意球"),
    ("corner kick", "角球"),
    ("offside", "越位"),
    ("yellow card", "黄牌"),
    ("red card", "红牌"),
    ("substitution", "换人"),
    ("half-time", "半场"),
    ("full-time", "全场"),
    ("extra time", "加时赛"),
    ("penalty shootout", "点球大战"),
    # Positions
    ("goalkeeper", "门将"),
    ("defender", "后卫"),
    ("midfielder", "中场"),
    ("forward", "前锋"),
    ("striker", "前锋"),
    ("winger", "边锋"),
    ("centre-back", "中后卫"),
    ("full-back", "边后卫"),
    ("defensive midfielder", "防守型中场"),
    ("attacking midfielder", "攻击型中场"),
    # Tactics
    ("formation", "阵型"),
    ("tactic", "战术"),
    ("counter-attack", "反击"),
    ("pressing", "压迫"),
    ("possession", "控球"),
    ("cross", "传中"),
    ("through ball", "直塞"),
    ("one-touch", "一脚出球"),
    ("header", "头球"),
    ("volley", "凌空抽射"),
    # Results
    ("victory", "胜利"),
    ("defeat", "失败"),
    ("draw", "平局"),
    ("win", "获胜"),
    ("loss", "失利"),
    ("nil", "零"),
    ("clean sheet", "零封"),
    # Transfers
    ("transfer", "转会"),
    ("signing", "签约"),
    ("contract", "合同"),
    ("loan", "租借"),
    ("release clause", "解约金条款"),
    ("agent", "经纪人"),
    ("medical", "体检"),
    ("fee", "转会费"),
    # Injuries
    ("injury", "伤病"),
    ("injured", "受伤"),
    ("fitness", "体能"),
    ("recovery", "康复"),
    ("surgery", "手术"),
    ("rehabilitation", "康复训练"),
    # Officials, venues and league structure
    ("manager", "主教练"),
    ("coach", "教练"),
    ("referee", "裁判"),
    ("linesman", "边裁"),
    ("var", "VAR"),
    ("stadium", "体育场"),
    ("pitch", "球场"),
    ("derby", "德比"),
    ("relegation", "降级"),
    ("promotion", "升级"),
    ("playoffs", "附加赛"),
)

TEAMS: Final[tuple[tuple[str, str], ...]] = (
    # Premier League
    ("Manchester United", "曼联"),
    ("Manchester City", "曼城"),
    ("Liverpool", "利物浦"),
    ("Arsenal", "阿森纳"),
    ("Chelsea", "切尔西"),
    ("Tottenham", "热刺"),
    ("Newcastle United", "纽卡斯尔"),
    ("West Ham United", "西汉姆联"),
    ("Brighton", "布莱顿"),
    ("Aston Villa", "阿斯顿维拉"),
    # La Liga
    ("Real Madrid", "皇家马德里"),
    ("Barcelona", "巴塞罗那"),
    ("Atletico Madrid", "马德里竞技"),
    ("Sevilla", "塞维利亚"),
    ("Valencia", "瓦伦西亚"),
    ("Villarreal", "比利亚雷亚尔"),
    ("Real Sociedad", "皇家社会"),
    ("Athletic Bilbao", "毕尔巴鄂竞技"),
    # Serie A
    ("Juventus", "尤文图斯"),
    ("Inter Milan", "国际米兰"),
    ("AC Milan", "AC米兰"),
    ("Napoli", "那不勒斯"),
    ("Roma", "罗马"),
    ("Lazio", "拉齐奥"),
    ("Atalanta", "亚特兰大"),
    ("Fiorentina", "佛罗伦萨"),
    # Bundesliga
    ("Bayern Munich", "拜仁慕尼黑"),
    ("Borussia Dortmund", "多特蒙德"),
    ("RB Leipzig", "莱比锡红牛"),
    ("Bayer Leverkusen", "勒沃库森"),
    ("Eintracht Frankfurt", "法兰克福"),
    ("Wolfsburg", "沃尔夫斯堡"),
    # Ligue 1
    ("Paris Saint-Germain", "巴黎圣日耳曼"),
    ("Marseille", "马赛"),
    ("Lyon", "里昂"),
    ("Monaco", "摩纳哥"),
    ("Nice", "尼斯"),
    ("Lille", "里尔"),
    # Elsewhere
    ("Ajax", "阿贾克斯"),
    ("PSV", "PSV埃因霍温"),
    ("Porto", "波尔图"),
    ("Benfica", "本菲卡"),
    ("Sporting CP", "葡萄牙体育"),
)

PLAYERS: Final[tuple[tuple[str, str], ...]] = (
    # Current
    ("Lionel Messi", "梅西"),
    ("Cristiano Ronaldo", "克里斯蒂亚诺·罗纳尔多"),
    ("Kylian Mbappé", "姆巴佩"),
    ("Erling Haaland", "哈兰德"),
    ("Kevin De Bruyne", "德布劳内"),
    ("Mohamed Salah", "萨拉赫"),
    ("Karim Benzema", "本泽马"),
    ("Robert Lewandowski", "莱万多夫斯基"),
    ("Luka Modrić", "莫德里奇"),
    ("Virgil van Dijk", "范迪克"),
    ("Sadio Mané", "马内"),
    ("Harry Kane", "凯恩"),
    ("Pedri", "佩德里"),
    ("Gavi", "加维"),
    ("Jude Bellingham", "贝林厄姆"),
    ("Vinícius Jr.", "维尼修斯"),
    ("Federico Valverde", "巴尔韦德"),
    ("Jamal Musiala", "穆西亚拉"),
    # Legends
    ("Pelé", "贝利"),
    ("Diego Maradona", "马拉多纳"),
    ("Johan Cruyff", "克鲁伊夫"),
    ("Franz Beckenbauer", "贝肯鲍尔"),
    ("Zinédine Zidane", "齐达内"),
    ("Ronaldinho", "罗纳尔迪尼奥"),
    ("Thierry Henry", "亨利"),
    ("Andrea Pirlo", "皮尔洛"),
    ("Francesco Totti", "托蒂"),
    ("Paolo Maldini", "马尔蒂尼"),
)

COMPETITIONS: Final[tuple[tuple[str, str], ...]] = (
    # UEFA
    ("UEFA Champions League", "欧洲冠军联赛"),
    ("UEFA Europa League", "欧洲联赛"),
    ("UEFA Conference League", "欧洲协会联赛"),
    ("UEFA European Championship", "欧洲杯"),
    ("UEFA Nations League", "欧洲国家联赛"),
    # International
    ("FIFA World Cup", "世界杯"),
    ("FIFA Club World Cup", "世俱杯"),
    ("Copa America", "美洲杯"),
    ("Africa Cup of Nations", "非洲杯"),
    ("Asian Cup", "亚洲杯"),
    # Leagues
    ("Premier League", "英超联赛"),
    ("La Liga", "西甲联赛"),
    ("Serie A", "意甲联赛"),
    ("Bundesliga", "德甲联赛"),
    ("Ligue 1", "法甲联赛"),
    ("Eredivisie", "荷甲联赛"),
    ("Primeira Liga", "葡超联赛"),
    # Cups
    ("FA Cup", "足总杯"),
    ("Copa del Rey", "国王杯"),
    ("Coppa Italia", "意大利杯"),
    ("DFB-Pokal", "德国杯"),
    ("Coupe de France", "法国杯"),
    ("EFL Cup", "联赛杯"),
    ("Community Shield", "社区盾杯"),
    ("Supercopa de España", "西班牙超级杯"),
    ("Supercoppa Italiana", "意大利超级杯"),
    # Fixtures
    ("El Clásico", "国家德比"),
    ("Manchester Derby", "曼彻斯特德比"),
    ("North London Derby", "北伦敦德比"),
    ("Milan Derby", "米兰德比"),
    ("Der Klassiker", "德国国家德比"),
)

# Chinese vocabulary whose presence in a translation counts as domain fidelity.
TARGET_DOMAIN_TERMS: Final[tuple[str, ...]] = (
    "足球",
    "球员",
    "球队",
    "比赛",
    "联赛",
    "转会",
    "进球",
    "助攻",
    "射门",
    "传球",
    "防守",
    "进攻",
    "教练",
    "裁判",
    "球场",
    "赛季",
    "英超",
    "西甲",
    "意甲",
    "德甲",
    "欧冠",
    "欧联杯",
    "世界杯",
)

# Short Chinese renderings fans actually use for star players and clubs.
CANONICAL_ENTITY_NAMES: Final[tuple[str, ...]] = (
    "梅西",
    "C罗",
    "内马尔",
    "姆巴佩",
    "哈兰德",
    "贝林厄姆",
    "皇马",
    "巴萨",
    "曼联",
    "曼城",
    "利物浦",
    "阿森纳",
    "切尔西",
    "拜仁",
    "多特",
    "PSG",
    "国米",
    "米兰",
    "尤文",
)

FAILURE_MARKERS: Final[tuple[str, ...]] = ("[翻译错误]", "[无法翻译]", "???", "***")

PROMPT_GLOSSARY: Final[tuple[tuple[str, str], ...]] = (
    ("Transfer/Signing", "转会/签约"),
    ("Hat-trick", "帽子戏法"),
    ("Own goal", "乌龙球"),
    ("Penalty", "点球/罚球"),
    ("Free kick", "任意球"),
    ("Corner kick", "角球"),
    ("Yellow card", "黄牌"),
    ("Red card", "红牌"),
    ("Offside", "越位"),
    ("VAR", "视频助理裁判"),
    ("Clean sheet", "零封"),
    ("Assist", "助攻"),
    ("Debut", "首秀"),
    ("Loan", "租借"),
)

PROMPT_LEAGUE_GLOSSARY: Final[tuple[tuple[str, str], ...]] = (
    ("Premier League", "英超"),
    ("La Liga", "西甲"),
    ("Serie A", "意甲"),
    ("Bundesliga", "德甲"),
    ("Champions League", "欧冠"),
    ("Europa League", "欧联杯"),
)

# Seed translations written into the cache at start-up (en -> zh-CN).
WARMUP_TERMS: Final[tuple[tuple[str, str], ...]] = (
    ("Goal", "进球"),
    ("Penalty", "点球"),
    ("Free kick", "任意球"),
    ("Corner kick", "角球"),
    ("Yellow card", "黄牌"),
    ("Red card", "红牌"),
    ("Offside", "越位"),
    ("Hat-trick", "帽子戏法"),
    ("Own goal", "乌龙球"),
    ("VAR", "视频助理裁判"),
)
