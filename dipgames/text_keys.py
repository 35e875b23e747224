"""Translation keys for the text shown by the games."""

MAIN_MENU_TITLE = "main_menu.title"
MAIN_MENU_PLAY_BUTTON = "main_menu.play_button"
POOP = "global.poop"
BACK = "global.back"
DRAW = "global.draw"
VICTORY = "global.victory"
DEFEAT = "global.defeat"

LOVES = "global.loves"
LIKES = "global.likes"
NEUTRAL = "global.neutral"
DISLIKES = "global.dislikes"
HATES = "global.hates"
DESPISES = "global.despises"

SPICY = "global.spicy"
COOL = "global.cool"
ASTRINGENT = "global.astringent"
UMAMI = "global.umami"
FATTY = "global.fatty"
SOUR = "global.sour"
BITTER = "global.bitter"
SWEET = "global.sweet"
SALTY = "global.salty"
CRUNCHY = "global.crunchy"
CREAMY = "global.creamy"
FIZZY = "global.fizzy"
JUICY = "global.juicy"
TENDER = "global.tender"
DRY = "global.dry"
ELASTIC = "global.elastic"

UI_PET_INFO_PANEL_SPECIES = "ui.pet_panel.species"
UI_PET_INFO_PANEL_AGE = "ui.pet_panel.age"
UI_PET_PANEL_NO_THOUGHT = "ui.pet_panel.no_thought"
MINIGAME_SELECT_TIC_TAC_TOE = "minigame_select.tic_tac_toe"
MINIGAME_SELECT_SPRINT = "minigame_select.sprint"
MINIGAME_SELECT_HIGHER_LOWER = "minigame_select.higher_lower"
MINIGAME_SELECT_FOUR_IN_ROW = "minigame_select.four_in_row"
MINIGAME_SELECT_ENDLESS_SHOOTER = "minigame_select.endless_shooter"
MINIGAME_SELECT_ENDLESS_RHYTHM = "minigame_select.rhythm"

DIPDEX_FOOD_SENSATION_TITLE = "dipdex.food_sensation_title"
DIPDEX_STOMACH_SIZE = "dipdex.stomach_size"
DIPDEX_SPEED_TITLE = "dipdex.speed_title"
DIPDEX_POOP_TITLE = "dipdex.poop_title"
DIPDEX_CARES_ABOUT_CLEANLINESS = "dipdex.cares_about_cleanliness"
DIPDEX_DOES_NOT_CARE_ABOUT_CLEANLINESS = "dipdex.does_not_care_about_cleanliness"
DIPDEX_DOES_NOT_POOP = "dipdex.does_not_poop"
DIPDEX_DESCRIPTION_HEADER = "dipdex.description_header"
DIPDEX_DESCRIPTION_DOES_NOT_EXIST = "dipdex.description_does_not_exist"
DIPDEX_STATS_HEADER = "dipdex.stats_header"
DIPDEX_SPECIES_TITLE = "dipdex.species_title"

FOOD_BUY_SCENE_TITLE = "food_buy_scene.title"

MINIGAME_ENDLESS_SHOOTER_COOLDOWN = "minigame.endless_shooter.cooldown"
MINIGAME_ENDLESS_SHOOTER_PISTOL = "minigame.endless_shooter.pistol"
MINIGAME_ENDLESS_SHOOTER_PISTOL_COOLDOWN = "minigame.endless_shooter.pistol_cooldown"
MINIGAME_ENDLESS_SHOOTER_PISTOL_DAMAGE = "minigame.endless_shooter.pistol_damage"
MINIGAME_ENDLESS_SHOOTER_MINIGUN = "minigame.endless_shooter.minigun"
MINIGAME_ENDLESS_SHOOTER_MINIGUN_COOLDOWN = "minigame.endless_shooter.minigun_cooldown"
MINIGAME_ENDLESS_SHOOTER_MINIGUN_DAMAGE = "minigame.endless_shooter.minigun_damage"
MINIGAME_ENDLESS_SHOOTER_ROCKET = "minigame.endless_shooter.rocket"
MINIGAME_ENDLESS_SHOOTER_ROCKET_COOLDOWN = "minigame.endless_shooter.rocket_cooldown"
MINIGAME_ENDLESS_SHOOTER_ROCKET_DAMAGE = "minigame.endless_shooter.rocket_damage"
MINIGAME_ENDLESS_SHOOTER_WAVE_GUN = "minigame.endless_shooter.wave_gun"
MINIGAME_ENDLESS_SHOOTER_WAVE_GUN_COOLDOWN = "minigame.endless_shooter.wave_gun_cooldown"
MINIGAME_ENDLESS_SHOOTER_WAVE_GUN_DAMAGE = "minigame.endless_shooter.wave_gun_damage"
MINIGAME_ENDLESS_SHOOTER_CLUSTER_GUN = "minigame.endless_shooter.cluster_gun"
MINIGAME_ENDLESS_SHOOTER_CLUSTER_GUN_COOLDOWN = (
    "minigame.endless_shooter.cluster_gun_cooldown"
)
MINIGAME_ENDLESS_SHOOTER_CLUSTER_GUN_DAMAGE = "minigame.endless_shooter.cluster_gun_damage"
MINIGAME_ENDLESS_SHOOTER_TURNCOAT_GUN = "minigame.endless_shooter.turncoat_gun"
MINIGAME_ENDLESS_SHOOTER_TURNCOAT_GUN_COOLDOWN = (
    "minigame.endless_shooter.turncoat_gun_cooldown"
)
MINIGAME_ENDLESS_SHOOTER_SCORE = "minigame.endless_shooter.score"
MINIGAME_ENDLESS_SHOOTER_QUIT = "minigame.endless_shooter.quit"

MINIGAME_RHYTHM_LOADING = "minigame.rhythm.loading"